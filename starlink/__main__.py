"""Module entrypoint for `python -m starlink`.

Forwards to the same main() function as the `starlink` console script.

Usage:
    ```bash
    python -m starlink suggest psf/requests
    python -m starlink ignore psf/requests-html
    ```
"""

from .cli import main

if __name__ == "__main__":
    main()
