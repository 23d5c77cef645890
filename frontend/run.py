import sys

from engine_frontend.server import main

if __name__ == "__main__":
    # Binds 0.0.0.0:$PORT (3000 by default); use HOST to restrict
    sys.exit(main())
