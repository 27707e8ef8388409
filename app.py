import logging

from kivy.app import App
from kivy.core.window import Window

from models.actions import SetError
from models.catalog import Catalog
from persistence.catalog_store import load_catalog
from screens.main import NavigatorRoot
from services.store import Store
from shared.config import load_config, save_window_size
from shared.errors import CatalogError, ConfigError, format_catalog_error
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


class WordNavigatorApp(App):
    title = "Word Navigator"

    def build(self):
        settings = load_config()
        configure_logging(settings["logging"]["level"])
        Window.size = (settings["window"]["width"], settings["window"]["height"])

        self.store = Store()
        catalog_error = None
        try:
            catalog = load_catalog(settings["catalog"]["path"])
        except CatalogError as e:
            logger.error("catalog unavailable: %s", e)
            catalog, catalog_error = Catalog(), e

        root = NavigatorRoot(store=self.store, catalog=catalog, config=settings)
        if catalog_error is not None:
            self.store.dispatch(SetError(format_catalog_error(catalog_error)))
        logger.info("started with %d words, %d collections", len(catalog.words), len(catalog.collections))
        return root

    def on_stop(self):
        try:
            save_window_size(*Window.size)
        except (ConfigError, OSError) as e:
            logger.warning("window size not saved: %s", e)


def main():
    WordNavigatorApp().run()


if __name__ == "__main__":
    main()
