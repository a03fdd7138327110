"""
Scene Renderer
==============
Paints the circle, the curves, the intersection markers and their number
labels with a `QPainter`.

`render_scene` is a pure function of the session: it keeps no drawing state
between frames apart from the label offsets, which `LabelPlacer` rebuilds at
the start of every pass.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPainterPath, QPen

from circlecurves.model.curves import Curve
from circlecurves.model.intersections import Intersection
from circlecurves.model.labels import LabelPlacer
from circlecurves.model.state import PuzzleSession

CIRCLE_COLOR = QColor("#333333")
CIRCLE_WIDTH = 3
POINT_FILL = QColor("#FF4444")
OUTLINE_COLOR = QColor("#333333")
LABEL_BACKGROUND = QColor(255, 255, 255, int(0.9 * 255))
BACKGROUND = QColor("#FFFFFF")


def curve_path(curve: Curve) -> QPainterPath:
    path = QPainterPath(QPointF(curve.start.x, curve.start.y))
    path.quadTo(QPointF(curve.control.x, curve.control.y), QPointF(curve.end.x, curve.end.y))
    return path


def label_font(scale: float, base_size: float) -> QFont:
    font = QFont("Arial")
    font.setBold(True)
    font.setPixelSize(max(1, round(max(base_size, base_size * scale))))
    return font


def label_rect(text: str, center: QPointF, font: QFont, padding: float) -> QRectF:
    """Background rectangle of a label: measured text plus padding, centred on `center`."""
    metrics = QFontMetricsF(font)
    width = metrics.horizontalAdvance(text) + 2 * padding
    height = font.pixelSize() + 2 * padding
    return QRectF(center.x() - width / 2, center.y() - height / 2, width, height)


def render_scene(painter: QPainter, session: PuzzleSession, width: float, height: float) -> None:
    """Full redraw of the canvas."""
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.fillRect(QRectF(0, 0, width, height), BACKGROUND)

    _draw_circle(painter, session)
    _draw_curves(painter, session.curves)
    _draw_intersections(painter, session, session.labels)


def _draw_circle(painter: QPainter, session: PuzzleSession) -> None:
    circle = session.circle
    painter.setPen(QPen(CIRCLE_COLOR, CIRCLE_WIDTH))
    painter.setBrush(Qt.NoBrush)
    painter.drawEllipse(QPointF(circle.center.x, circle.center.y), circle.radius, circle.radius)


def _draw_curves(painter: QPainter, curves: list[Curve]) -> None:
    painter.setBrush(Qt.NoBrush)
    for curve in curves:
        if not curve.visible:
            continue
        painter.setPen(QPen(QColor(curve.color), curve.stroke_width))
        painter.drawPath(curve_path(curve))


def _draw_intersections(painter: QPainter, session: PuzzleSession, labels: LabelPlacer) -> None:
    cfg = session.config
    labels.reset(session.circle.center)

    for intersection in session.intersections:
        if not intersection.visible:
            continue
        center = QPointF(intersection.position.x, intersection.position.y)

        # marker
        size = cfg.point_radius * intersection.scale
        painter.setPen(QPen(OUTLINE_COLOR, 2))
        painter.setBrush(POINT_FILL)
        painter.drawEllipse(center, size, size)

        # label
        offset = labels.offset_for(intersection, session.intersections)
        _draw_label(painter, intersection, center + QPointF(offset.x, offset.y), cfg.label_font_size, cfg.label_padding)


def _draw_label(painter: QPainter, intersection: Intersection, anchor: QPointF, font_size: float, padding: float) -> None:
    text = str(intersection.number)
    font = label_font(intersection.scale, font_size)
    rect = label_rect(text, anchor, font, padding)

    painter.setPen(Qt.NoPen)
    painter.setBrush(LABEL_BACKGROUND)
    painter.drawRect(rect)

    painter.setPen(QPen(OUTLINE_COLOR, 1))
    painter.setBrush(Qt.NoBrush)
    painter.drawRect(rect)

    painter.setFont(font)
    painter.drawText(rect, Qt.AlignCenter, text)

