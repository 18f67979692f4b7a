"""Package entry point for ``python -m ali_respeaker``.

WHY: Users run the respeller as ``python -m ali_respeaker "texte"`` for
CLI mode, or ``python -m ali_respeaker --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app with uvicorn. Otherwise, delegates to the CLI's main().

RULES:
- ``--serve`` starts the API (host and port from ALI_API_HOST / ALI_API_PORT)
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from ali_respeaker.server.app import run_api
        run_api()
    else:
        from ali_respeaker.cli import main
        main()
