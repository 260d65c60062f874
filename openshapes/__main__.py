from openshapes import Circle, Rectangle, Renderer, Triangle
from openshapes.common import settings
from openshapes.common.logging import setup_default_logging


def main() -> None:
    setup_default_logging(settings.get().LOG_LEVEL)
    Renderer().draw_all([Rectangle(), Circle(), Triangle()])


if __name__ == "__main__":
    main()
