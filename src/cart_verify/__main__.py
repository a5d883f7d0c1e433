import sys

from cart_verify.main import main

if __name__ == "__main__":
    sys.exit(main())
