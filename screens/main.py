import logging
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from kivy.uix.widget import Widget
from kivy.graphics import Color, Rectangle
from kivy.clock import Clock
from ui.widgets import RoundedButton as Button, TabPill
from models.actions import (
    ActivateSearch, ClearError, DismissModal, Navigate, SwitchTab, UpdateNavigationPath,
)
from models.destinations import AddWord, PresentationStyle, Settings
from models.state import Tab
from services.search import collection_filter, word_filter
from .collection_grid import CollectionsScreen
from .destinations import DestinationScreens
from .search import SearchOverlay
from .words import WordsScreen

logger = logging.getLogger(__name__)


class NavigatorRoot(WordsScreen, CollectionsScreen, DestinationScreens, SearchOverlay, BoxLayout):
    """Root widget: renders the store's state and turns touches into actions."""

    def __init__(self, store, catalog, config, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = 12
        self.spacing = 8

        self.store = store
        self.catalog = catalog
        self.config = config
        self.theme = {k: tuple(v) for k, v in config["theme"].items()}
        self.word_filter = word_filter(catalog.words)
        self.collection_filter = collection_filter(catalog.collections)

        with self.canvas.before:
            Color(*self.theme["bg"])
            self.rect = Rectangle(size=self.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self._render_scheduled = False
        self._modal_popup = None
        self._modal_shown = None
        self._error_popup = None
        self._error_shown = None

        self._build_ui()
        self._unsubscribe = store.subscribe(self._on_state_changed)
        self._remove_search_cb = store.on_search_activated(self._focus_search_field)
        self.render()

    # ---- UI building ----
    def _build_ui(self):
        self.header = BoxLayout(size_hint=(1, None), height=64, spacing=8)
        self.back_btn = Button(text="< Back", size_hint=(None, 1), width=140, font_size=22,
                               background_color=self.theme["surface"], color=self.theme["text"])
        self.back_btn.bind(on_release=self._go_back)
        self.title_label = Label(text="", font_size=34, bold=True, halign='left', valign='middle',
                                 color=self.theme["text"])
        self.title_label.bind(size=lambda inst, _v: setattr(inst, 'text_size', inst.size))
        self.header.add_widget(self.back_btn)
        self.header.add_widget(self.title_label)
        self.add_widget(self.header)

        self.content = BoxLayout(orientation='vertical', size_hint=(1, 1))
        self.add_widget(self.content)

        self.add_widget(self._build_search_bar())

        bar = BoxLayout(size_hint=(1, None), height=72, spacing=10, padding=(4, 4))
        pills = BoxLayout(spacing=4, size_hint=(None, 1), width=360)
        self.tab_pills = {}
        for tab in Tab:
            pill = TabPill(text=tab.label, font_size=22)
            pill.bind(on_release=lambda *_x, t=tab: self.store.dispatch(SwitchTab(t)))
            self.tab_pills[tab] = pill
            pills.add_widget(pill)
        bar.add_widget(pills)

        search_btn = Button(text="Search", size_hint=(None, 1), width=120, font_size=22,
                            background_color=self.theme["surface"], color=self.theme["text"])
        search_btn.bind(on_release=lambda *_: self.store.dispatch(ActivateSearch()))
        add_btn = Button(text="+", size_hint=(None, 1), width=72, font_size=30,
                         background_color=self.theme["primary"])
        add_btn.bind(on_release=lambda *_: self.store.dispatch(Navigate(AddWord(), PresentationStyle.FULLSCREEN)))
        settings_btn = Button(text="Settings", size_hint=(None, 1), width=130, font_size=22,
                              background_color=self.theme["surface"], color=self.theme["text"])
        settings_btn.bind(on_release=lambda *_: self.store.dispatch(Navigate(Settings(), PresentationStyle.SHEET)))
        bar.add_widget(search_btn)
        bar.add_widget(add_btn)
        bar.add_widget(Widget())
        bar.add_widget(settings_btn)
        self.add_widget(bar)

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    def _go_back(self, *_):
        state = self.store.state
        path = state.current_path
        if path:
            self.store.dispatch(UpdateNavigationPath(state.current_tab, path[:-1]))

    # ---- Rendering ----
    def _on_state_changed(self, new_state, old_state):
        if self._render_scheduled:
            return
        self._render_scheduled = True
        Clock.schedule_once(self._run_render, 0)

    def _run_render(self, dt):
        self._render_scheduled = False
        self.render()

    def render(self):
        state = self.store.state
        for tab, pill in self.tab_pills.items():
            pill.selected = tab is state.current_tab
        self._render_content(state)
        self._render_search_bar(state)
        self._render_modal(state)
        self._render_error(state)

    def _render_content(self, state):
        self.content.clear_widgets()
        path = state.current_path
        self.back_btn.opacity = 1 if path else 0
        self.back_btn.disabled = not path
        if state.is_loading:
            self.title_label.text = state.current_tab.label
            self.content.add_widget(Label(text=f"{state.loading_context}…", font_size=30, color=self.theme["muted"]))
            return
        if path:
            top = path[-1]
            self.title_label.text = top.title
            self.content.add_widget(self.build_destination_view(top))
            return
        self.title_label.text = state.current_tab.label
        if state.current_tab is Tab.WORDS:
            self.content.add_widget(self._build_words_list(state))
        else:
            self.content.add_widget(self._build_collections_grid(state))

    def _render_modal(self, state):
        modal = state.modal_presentation
        if modal == self._modal_shown:
            return
        if self._modal_popup is not None:
            popup, self._modal_popup = self._modal_popup, None
            popup.dismiss()
        self._modal_shown = modal
        if modal is None:
            return
        fullscreen = modal.style is PresentationStyle.FULLSCREEN
        root = BoxLayout(orientation='vertical', spacing=8)
        root.add_widget(self.build_destination_view(modal.destination))
        done = Button(text="Done", size_hint=(1, None), height=64, font_size=24,
                      background_color=self.theme["closeButton"])
        done.bind(on_release=lambda *_: self.store.dispatch(DismissModal()))
        root.add_widget(done)
        popup = Popup(
            title=modal.destination.title,
            content=root,
            size_hint=(1, 1) if fullscreen else (0.95, 0.6),
            auto_dismiss=not fullscreen,
        )
        popup.bind(on_dismiss=lambda inst: self._on_modal_dismissed(inst))
        self._modal_popup = popup
        popup.open()

    def _on_modal_dismissed(self, popup):
        # swiped/tapped away by the user rather than closed by a state change
        if popup is self._modal_popup:
            self._modal_popup = None
            self._modal_shown = None
            self.store.dispatch(DismissModal())

    def _render_error(self, state):
        message = state.current_error
        if message == self._error_shown:
            return
        if self._error_popup is not None:
            popup, self._error_popup = self._error_popup, None
            popup.dismiss()
        self._error_shown = message
        if not message:
            return
        logger.info("showing error: %s", message)
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)
        lbl = Label(text=message, font_size=24, halign='center', valign='middle', color=self.theme["text"])
        lbl.bind(size=lambda inst, _v: setattr(inst, 'text_size', (inst.width - 12, None)))
        root.add_widget(lbl)
        ok = Button(text="OK", size_hint=(1, None), height=60, font_size=24,
                    background_color=self.theme["primary"])
        ok.bind(on_release=lambda *_: self.store.dispatch(ClearError()))
        root.add_widget(ok)
        popup = Popup(title="Error", content=root, size_hint=(0.8, 0.4), auto_dismiss=False)
        self._error_popup = popup
        popup.open()

    def detach(self):
        self._unsubscribe()
        self._remove_search_cb()
