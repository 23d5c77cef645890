import sys

from engine_backend.server import main

if __name__ == "__main__":
    # Binds 0.0.0.0:$PORT (3001 by default); use HOST to restrict
    sys.exit(main())
