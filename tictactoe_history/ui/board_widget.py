from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_SIZE, PLAYER_X, MIN_BOARD_SIDE, BOARD_BG_COLOR, GRID_COLOR,
    X_COLOR, O_COLOR, WIN_BORDER_COLOR
)

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits linear cell index on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # reference to game engine
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_SIDE, MIN_BOARD_SIDE))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and border the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BG_COLOR))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            board = self.engine.current_board
            for index, sym in enumerate(board):
                if not sym: continue
                r, c = divmod(index, BOARD_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == PLAYER_X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # highlight winning cells
            line = self.engine.winning_line()
            if line:
                painter.setPen(QPen(QColor(WIN_BORDER_COLOR), 4))
                for index in line:
                    r, c = divmod(index, BOARD_SIZE)
                    painter.drawRect(QRectF(offset_x + c*cell_size + 2,
                                            offset_y + r*cell_size + 2,
                                            cell_size - 4, cell_size - 4))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / BOARD_SIZE
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        self.cell_clicked.emit(row*BOARD_SIZE + col)  # engine ignores bad clicks
