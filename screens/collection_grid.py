import logging
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.scrollview import ScrollView
from kivy.uix.label import Label
from kivy.clock import Clock
from ui.widgets import RoundedButton as Button, ColorDot, collection_rgba
from models.actions import Navigate, SetError, SetLoading
from models.destinations import CollectionDetail
from shared.errors import AppErrors

logger = logging.getLogger(__name__)


class CollectionsScreen:
    def _build_collections_grid(self, state):
        sv = ScrollView(size_hint=(1, 1))
        grid = GridLayout(cols=2, spacing=16, size_hint_y=None, padding=(8, 8))
        grid.bind(minimum_height=grid.setter('height'))
        sv.add_widget(grid)

        collections = self.collection_filter.filter(state.search_query)
        if not collections:
            grid.cols = 1
            grid.add_widget(Label(text="No collections found.", size_hint_y=None, height=48, font_size=22,
                                  color=self.theme["muted"]))
            return sv
        for collection in collections:
            grid.add_widget(self._make_collection_card(collection))
        return sv

    def _make_collection_card(self, collection):
        card = BoxLayout(orientation='vertical', size_hint_y=None, height=180, padding=12, spacing=6)
        card.add_widget(ColorDot(rgba=collection_rgba(collection.color), size_hint=(1, None), height=40))
        btn = Button(
            text=f"[b]{collection.name}[/b]\n[size=20]{collection.word_count} words[/size]",
            markup=True,
            font_size=26,
            halign='left',
            valign='middle',
            background_color=self.theme["surface"],
            color=self.theme["text"],
        )
        btn.bind(size=lambda inst, _v: setattr(inst, 'text_size', (inst.width - 24, inst.height)))
        btn.bind(on_release=lambda *_: self.open_collection(collection))
        card.add_widget(btn)
        return card

    def open_collection(self, collection):
        context = f"Opening {collection.name}"
        self.store.dispatch(SetLoading(context))
        Clock.schedule_once(lambda dt: self._finish_open_collection(collection.id, context),
                            self.config["loading"]["delay_seconds"])

    def _finish_open_collection(self, collection_id: str, context: str):
        state = self.store.state
        if not (state.is_loading and state.loading_context == context):
            # the user left the loading screen (e.g. started a search) in the meantime
            logger.debug("collection %r no longer awaited, skipping", collection_id)
            return
        fresh = self.catalog.find_collection(collection_id)
        if fresh is None:
            self.store.dispatch(SetError(AppErrors.COLLECTION_NOT_FOUND))
            return
        self.store.dispatch(Navigate(CollectionDetail(fresh)))
