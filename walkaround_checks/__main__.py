"""Point d'entrée du module ``walkaround_checks``.

Fonctionne avec ``python -m walkaround_checks`` comme avec un appel direct
``python walkaround_checks/__main__.py``. Dans ce second cas, la racine du
projet est ajoutée au ``sys.path`` pour retrouver le paquet.
"""

from __future__ import annotations

import os
import sys


if __package__ in {None, ""}:  # Exécution en tant que script direct.
    package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)
    from walkaround_checks.cli import main  # type: ignore import-not-found
else:  # Exécution via ``python -m walkaround_checks``.
    from .cli import main


if __name__ == "__main__":  # pragma: no cover - point d'entrée standard
    raise SystemExit(main())
