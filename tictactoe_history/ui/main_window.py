import logging

from ..config import (
    WINDOW_TITLE, SORT_ACTIVE_BG, SORT_ACTIVE_FG,
    SORT_INACTIVE_BG, SORT_INACTIVE_FG
)
from ..game_logic import GameEngine
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QListWidget,
    QListWidgetItem, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window: board on the left, move history on the right
    """
    def __init__(self, ascending=True):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = GameEngine(ascending=ascending)
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QListWidget { background-color: #2a2a2a; color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu

        board_column = QVBoxLayout()
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        board_column.addWidget(self.status_label)
        board_column.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.main_layout.addLayout(board_column, 2)

        self._create_history_panel()       # sort toggle + move list
        self.main_layout.addWidget(self.history_panel, 1)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_history_panel(self):
        '''sort button above the list of moves'''
        self.history_panel = QWidget()
        layout = QVBoxLayout(self.history_panel)
        layout.setContentsMargins(0, 0, 0, 0)
        self.sort_button = QPushButton("⇅ Sort")
        self.sort_button.setToolTip("Toggle move order")
        self.sort_button.clicked.connect(self._on_sort_clicked)
        layout.addWidget(self.sort_button, alignment=Qt.AlignLeft)
        self.move_list = QListWidget()
        self.move_list.itemClicked.connect(self._on_history_item_clicked)
        layout.addWidget(self.move_list, 1)

    def refresh(self):
        """
        re-read engine state into every widget
        """
        self.status_label.setText(self.engine.status_text())
        self._update_sort_button()
        self._rebuild_move_list()
        self.board_widget.update()

    def _update_sort_button(self):
        # accent colours while chronological
        if self.engine.state.ascending:
            bg, fg = SORT_ACTIVE_BG, SORT_ACTIVE_FG
        else:
            bg, fg = SORT_INACTIVE_BG, SORT_INACTIVE_FG
        self.sort_button.setStyleSheet(f"background: {bg}; color: {fg};")

    def _rebuild_move_list(self):
        self.move_list.clear()
        for entry in self.engine.move_entries():
            item = QListWidgetItem(entry.label)
            item.setData(Qt.UserRole, entry.move)
            if entry.is_current:
                f = item.font(); f.setBold(True); item.setFont(f)
            self.move_list.addItem(item)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # filled or post-game cells do nothing
        if self.engine.play_move(index) != "invalid":
            self.refresh()

    @Slot(QListWidgetItem)
    def _on_history_item_clicked(self, item):
        move = item.data(Qt.UserRole)
        if self.engine.jump_to(move):
            logger.debug("jumped to move %d", move)
            self.refresh()

    @Slot()
    def _on_sort_clicked(self):
        self.engine.toggle_sort_order()
        self.refresh()

    @Slot()
    def reset_game(self):
        # back to an empty board
        self.engine.reset_game()
        self.refresh()
