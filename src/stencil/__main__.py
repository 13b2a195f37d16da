"""Allow running stencil as a module: python -m stencil"""

from stencil.cli import app

if __name__ == "__main__":
    app()
