# Root launcher for either service: python run.py {backend|frontend}
# Each service lives in its own directory; put it on the path so this
# works from a plain checkout as well as an installed tree.
from pathlib import Path
import importlib
import sys

BASE = Path(__file__).resolve().parent
SERVICES = {
    "backend": "engine_backend.server",
    "frontend": "engine_frontend.server",
}


def _usage() -> int:
    print(f"usage: {Path(sys.argv[0]).name} {{{'|'.join(SERVICES)}}}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in SERVICES:
        sys.exit(_usage())
    name = sys.argv[1]
    sys.path.insert(0, str(BASE / name))
    server = importlib.import_module(SERVICES[name])
    sys.exit(server.main())
