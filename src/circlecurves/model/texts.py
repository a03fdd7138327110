"""User-facing strings in the two supported languages."""
from dataclasses import dataclass
from enum import StrEnum


class Language(StrEnum):
    ENGLISH = "english"
    CHINESE = "chinese"

    def toggled(self) -> "Language":
        return Language.CHINESE if self is Language.ENGLISH else Language.ENGLISH


@dataclass(frozen=True)
class PuzzleTexts:
    title: str
    instructions: str
    toggle_label: str
    new_puzzle: str
    solved: str
    remaining: str
    mismatch: str
    resized: str
    pairs_title: str
    numbers_title: str


TEXTS: dict[Language, PuzzleTexts] = {
    Language.CHINESE: PuzzleTexts(
        title="填数字，曲线消失",
        instructions="找圆上与曲线的交点，点击右下角的数字使其填到右上方的方格中",
        toggle_label="English",
        new_puzzle="新游戏",
        solved="全部曲线已消失！",
        remaining="剩余曲线：{left}",
        mismatch="这两个数字不在同一条曲线上",
        resized="窗口大小已改变，已生成新的曲线",
        pairs_title="配对",
        numbers_title="数字",
    ),
    Language.ENGLISH: PuzzleTexts(
        title="Fill Numbers, Curves Disappear",
        instructions=(
            "Find intersection points of curves on the circle, click numbers in the "
            "bottom-right corner to fill them into the grid in the top-right corner"
        ),
        toggle_label="中文",
        new_puzzle="New Puzzle",
        solved="All curves are gone!",
        remaining="Curves left: {left}",
        mismatch="Those numbers are not on the same curve",
        resized="Window resized: the puzzle was redrawn and the grids reset",
        pairs_title="Pairs",
        numbers_title="Numbers",
    ),
}


def texts_for(language: Language) -> PuzzleTexts:
    return TEXTS[language]
