import PyInstaller.__main__
import os
import shutil


def build():
    # Clean previous builds
    for folder in ('build', 'dist'):
        if os.path.exists(folder):
            shutil.rmtree(folder)

    args = [
        'main.py',
        '--name=GPXReplay',
        '--onefile',
        '--windowed',
        '--clean',
        '--paths=src',
        # Imports dynamiques non détectés par l'analyse
        '--hidden-import=folium',
        '--hidden-import=branca',
        '--hidden-import=jinja2',
        '--hidden-import=gpxpy',
        '--hidden-import=pygeomag',
        '--hidden-import=pytz',
        '--hidden-import=PyQt6.QtWebEngineWidgets',
        # Coefficients WMM et templates folium/branca
        '--collect-data=pygeomag',
        '--collect-data=folium',
        '--collect-data=branca',
    ]

    print("Building GPX Replay...")
    PyInstaller.__main__.run(args)
    print("Build complete. Executable is in 'dist' folder.")


if __name__ == "__main__":
    build()
