import matplotlib.patches as mpatches
import matplotlib.pyplot as plt


class LifecycleVisualizer:
    """
    Визуализатор журнала жизненного цикла:
      - plot_counters: ступенчатые графики счётчиков по номеру события
      - plot_events: дорожка с типами событий
    """

    def __init__(self, metrics: dict):
        self.metrics = metrics
        self.events = metrics.get("events", [])
        self.seq = [e["seq"] for e in self.events]

        # цвета для разных типов событий
        self.event_colors = {
            "construct": "#4caf50",
            "move_construct": "#2196f3",
            "move_assign": "#5D00FF",
            "self_move_assign": "#9e9e9e",
            "destroy": "#f44336",
        }

        # подписи для легенды по типам
        self.event_labels = {
            "construct": "Конструирование",
            "move_construct": "Перемещающее конструирование",
            "move_assign": "Перемещающее присваивание",
            "self_move_assign": "Самоприсваивание",
            "destroy": "Разрушение",
        }

    def plot_counters(self, ax=None):
        """
        Рисует constructed / destructed / live после каждого события.
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=(12, 4))

        for key, label in (("constructed", "Сконструировано"),
                           ("destructed", "Разрушено"),
                           ("live", "Живых экземпляров")):
            ax.step(self.seq, [e[key] for e in self.events], where="post", label=label)

        ax.set_xlabel("Номер события")
        ax.set_ylabel("Значение счётчика")
        ax.set_title("Счётчики жизненного цикла")
        ax.legend(bbox_to_anchor=(1.02, 1), loc="upper left")
        return ax

    def plot_events(self, ax=None):
        """
        Рисует по одной отметке на событие, цвет — тип события.
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=(12, 2))

        for e in self.events:
            ax.scatter(e["seq"], 0, color=self.event_colors.get(e["event"], "gray"), s=80)
            ax.annotate(e["name"] or "∅", (e["seq"], 0), textcoords="offset points",
                        xytext=(0, 8), ha="center", fontsize=8)

        ax.set_yticks([])
        ax.set_xlabel("Номер события")
        ax.set_title("События")
        patches = [
            mpatches.Patch(color=self.event_colors[k], label=self.event_labels[k])
            for k in self.event_colors
        ]
        ax.legend(handles=patches, bbox_to_anchor=(1.02, 1), loc="upper left")
        return ax

    def show_all(self):
        """
        Выводит оба графика на одной фигуре.
        """
        fig = plt.figure(constrained_layout=True, figsize=(14, 6))
        gs = fig.add_gridspec(2, 1, height_ratios=[3, 1])

        self.plot_counters(fig.add_subplot(gs[0, 0]))
        self.plot_events(fig.add_subplot(gs[1, 0]))

        plt.show()
