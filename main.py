#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
GPX Replay - Relecture synchronisée de traces GPX
Point d'entrée principal de l'application.

Application PyQt6 pour rejouer plusieurs traces .gpx sur une carte
interactive, avec profil d'altitude et relèvements magnétiques.
"""

import sys
import os


def _ensure_src_on_path() -> None:
    """Permet d'exécuter `python main.py` sans installer le package."""
    if getattr(sys, "frozen", False):
        return

    repo_root = os.path.dirname(os.path.abspath(__file__))
    src_path = os.path.join(repo_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


def main() -> int:
    """
    Point d'entrée principal de l'application.

    Returns:
        Code de retour de l'application
    """
    _ensure_src_on_path()
    from gpxreplay.app.bootstrap import run

    return run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
