"""Punto de entrada de la app Kivy."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from vitals_screen.config import parse_args

_LOG = logging.getLogger("vitals_screen")


def main(argv: Sequence[str] | None = None) -> int:
    """Run app entrypoint."""
    config = parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Our arguments are already parsed; keep Kivy from reading sys.argv.
    os.environ.setdefault("KIVY_NO_ARGS", "1")
    try:
        from vitals_screen.app import run_app

        return run_app(config)
    except ImportError as exc:
        _LOG.error("No se pudo iniciar Kivy: %s", exc)
        _LOG.error("Instala dependencias de GUI: pip install 'vitals-screen[gui]'")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
