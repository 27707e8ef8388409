import logging
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.scrollview import ScrollView
from kivy.uix.label import Label
from kivy.uix.textinput import TextInput
from kivy.uix.widget import Widget
from ui.widgets import RoundedButton as Button, ColorDot, collection_rgba
from models.actions import DismissModal, SetError
from models.destinations import AddWord, CollectionDetail, Settings, WordDetail
from shared.errors import AppErrors

logger = logging.getLogger(__name__)


class DestinationScreens:
    def build_destination_view(self, destination):
        if isinstance(destination, WordDetail):
            return self._build_word_detail(destination.word)
        if isinstance(destination, CollectionDetail):
            return self._build_collection_detail(destination.collection)
        if isinstance(destination, AddWord):
            return self._build_add_word_form()
        if isinstance(destination, Settings):
            return self._build_settings_view()
        raise TypeError(f"unknown destination: {destination!r}")

    def _add_wrapped_label(self, parent, text, font_size, color=None, italic=False, indent_left=0):
        lbl = Label(
            text=f"[i]{text}[/i]" if italic else text,
            markup=italic,
            font_size=font_size,
            size_hint_y=None,
            halign='left',
            valign='top',
            color=color or self.theme["text"],
            padding=(indent_left, 0),
        )
        def _recalc(*_):
            lbl.text_size = (max(0, lbl.width - indent_left), None)
            lbl.texture_update()
            lbl.height = lbl.texture_size[1] + 8
        lbl.bind(width=_recalc)
        _recalc()
        parent.add_widget(lbl)
        return lbl

    def _scrolling_column(self):
        sv = ScrollView(size_hint=(1, 1))
        grid = GridLayout(cols=1, spacing=12, size_hint_y=None, padding=(16, 12))
        grid.bind(minimum_height=grid.setter('height'))
        sv.add_widget(grid)
        return sv, grid

    def _build_word_detail(self, word):
        sv, grid = self._scrolling_column()
        self._add_wrapped_label(grid, word.text, 48)
        self._add_wrapped_label(grid, "Definition", 24, color=self.theme["muted"])
        self._add_wrapped_label(grid, word.definition, 30, indent_left=12)
        if word.example:
            self._add_wrapped_label(grid, "Example", 24, color=self.theme["muted"])
            self._add_wrapped_label(grid, word.example, 30, italic=True, indent_left=12)
        return sv

    def _build_collection_detail(self, collection):
        sv, grid = self._scrolling_column()
        grid.add_widget(ColorDot(rgba=collection_rgba(collection.color), size_hint=(1, None), height=80))
        self._add_wrapped_label(grid, collection.name, 44)
        self._add_wrapped_label(grid, f"{collection.word_count} words", 26, color=self.theme["muted"])
        for title in collection.titles:
            row = Button(text=title, size_hint_y=None, height=64, font_size=26, halign='left', valign='middle',
                         background_color=self.theme["surface"], color=self.theme["text"])
            row.bind(size=lambda inst, _v: setattr(inst, 'text_size', (inst.width - 32, inst.height)))
            grid.add_widget(row)
        return sv

    def _build_add_word_form(self):
        root = BoxLayout(orientation='vertical', spacing=10, padding=16)
        root.add_widget(Label(text="Word", font_size=22, size_hint=(1, None), height=30, color=self.theme["muted"]))
        word_inp = TextInput(hint_text="Enter word", multiline=False, font_size=28, size_hint=(1, None), height=64)
        root.add_widget(word_inp)
        root.add_widget(Label(text="Definition", font_size=22, size_hint=(1, None), height=30, color=self.theme["muted"]))
        definition_inp = TextInput(hint_text="Enter definition", multiline=True, font_size=26, size_hint=(1, None), height=140)
        root.add_widget(definition_inp)
        root.add_widget(Label(text="Example", font_size=22, size_hint=(1, None), height=30, color=self.theme["muted"]))
        example_inp = TextInput(hint_text="Enter example", multiline=True, font_size=26, size_hint=(1, None), height=110)
        root.add_widget(example_inp)
        root.add_widget(Widget(size_hint_y=1))

        save = Button(text="Save Word", font_size=26, size_hint=(1, None), height=72,
                      background_color=self.theme["primary"], disabled=True)

        def _sync(*_):
            save.disabled = not ((word_inp.text or "").strip() and (definition_inp.text or "").strip())
        word_inp.bind(text=_sync)
        definition_inp.bind(text=_sync)

        def commit(*_):
            text = (word_inp.text or "").strip()
            definition = (definition_inp.text or "").strip()
            if not text or not definition:
                self.store.dispatch(SetError(AppErrors.ADD_WORD_INCOMPLETE))
                return
            # the catalog is read-only; the form only closes
            logger.info("add word %r submitted", text)
            self.store.dispatch(DismissModal())
        save.bind(on_release=commit)
        root.add_widget(save)
        return root

    def _build_settings_view(self):
        sv, grid = self._scrolling_column()
        self._add_wrapped_label(grid, "General", 24, color=self.theme["muted"])
        for label in ("Account", "Notifications", "Privacy"):
            grid.add_widget(Button(text=label, size_hint_y=None, height=64, font_size=26,
                                   background_color=self.theme["surface"], color=self.theme["text"]))
        self._add_wrapped_label(
            grid,
            f"{len(self.catalog.words)} words, {len(self.catalog.collections)} collections",
            22, color=self.theme["muted"],
        )
        return sv
