# storefront/__main__.py
from storefront.main import run

if __name__ == "__main__":
    run()
