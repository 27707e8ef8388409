from kivy.uix.gridlayout import GridLayout
from kivy.uix.scrollview import ScrollView
from kivy.uix.label import Label
from ui.widgets import RoundedButton as Button
from models.actions import Navigate
from models.destinations import WordDetail


class WordsScreen:
    def _build_words_list(self, state):
        sv = ScrollView(size_hint=(1, 1))
        grid = GridLayout(cols=1, spacing=4, size_hint_y=None, padding=(0, 6))
        grid.bind(minimum_height=grid.setter('height'))
        sv.add_widget(grid)

        words = self.word_filter.filter(state.search_query)
        max_items = self.config["search"]["max_results"]
        if not words:
            grid.add_widget(Label(text="No words found.", size_hint_y=None, height=48, font_size=22,
                                  color=self.theme["muted"]))
            return sv
        for word in words[:max_items]:
            btn = Button(
                text=f"[b]{word.text}[/b]\n[size=20]{word.definition}[/size]",
                markup=True,
                size_hint_y=None,
                height=96,
                font_size=28,
                halign='left',
                valign='middle',
                background_color=self.theme["surface"],
                color=self.theme["text"],
                shorten=True,
            )
            btn.bind(size=lambda inst, _v: setattr(inst, 'text_size', (inst.width - 40, inst.height)))
            btn.bind(on_release=lambda *_x, w=word: self.store.dispatch(Navigate(WordDetail(w))))
            grid.add_widget(btn)
        if len(words) > max_items:
            grid.add_widget(Label(text=f"… {len(words) - max_items} more …", size_hint_y=None, height=32,
                                  font_size=18, color=self.theme["muted"]))
        return sv
