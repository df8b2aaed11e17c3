"""
Step Sequence
=============
A cipher run is an ordered, finite list of Steps. Each Step carries a
human-readable description and a snapshot of what the renderer should draw
at that instant (`visual_data`).

`visual_data` is a tagged union discriminated on `type`. The renderer picks
a layout from the tag; each variant only carries the fields that layout
needs. All models are frozen and grids are stored as tuples of tuples, so a
step can never be changed after it is produced: a later step mutating the
working grid does not leak back into earlier snapshots.

Serialized form uses camelCase keys, matching what a JavaScript front end
expects:

    {"description": "...", "visualData": {"type": "grid", "highlightRow": 0, ...}}

Dependencies: pydantic >= 2.5
"""

from typing import Annotated, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Grid  = Tuple[Tuple[str, ...], ...]
Coord = Tuple[int, int]
Route = Tuple[Coord, ...]

Mode = Literal["encrypt", "decrypt"]


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LetterCode(_Frozen):
    """One Bacon letter and its five-symbol code."""

    letter: str
    code: str


# ── visual data variants ─────────────────────────────────────────────────────

class EmptyView(_Frozen):
    type: Literal["empty"] = "empty"


class TextView(_Frozen):
    type: Literal["text"] = "text"
    text: str
    highlight: Tuple[int, ...] = ()


class SplitView(_Frozen):
    type: Literal["split"] = "split"
    left: str
    right: str
    round: int = 0


class GridView(_Frozen):
    type: Literal["grid"] = "grid"
    grid: Grid
    rows: int
    cols: int
    highlight_row: Optional[int] = None
    highlight_column: Optional[int] = None
    partial: Optional[str] = None
    keyword: Optional[str] = None
    order: Optional[Tuple[int, ...]] = None
    route: Optional[Route] = None
    current_pos: Optional[Coord] = None
    show_route: bool = False


class KeywordView(_Frozen):
    type: Literal["keyword"] = "keyword"
    keyword: str
    order: Tuple[int, ...]


class EncodingView(_Frozen):
    type: Literal["encoding"] = "encoding"
    encodings: Tuple[LetterCode, ...]
    current_index: int
    partial: str


class DecodingView(_Frozen):
    type: Literal["decoding"] = "decoding"
    groups: Tuple[LetterCode, ...]
    current_index: int
    partial: str


class BinaryView(_Frozen):
    type: Literal["binary"] = "binary"
    encodings: Tuple[LetterCode, ...]
    ciphertext: str
    bits: str


class RoundView(_Frozen):
    """
    One phase of one Feistel round.

    `round` is the position in the animation (1..rounds). `key_round` is
    the round-key index actually used; the two differ on decryption, where
    keys are applied in reverse.
    """

    type: Literal["round"] = "round"
    round: int
    key_round: int
    phase: Literal["function", "add", "subtract", "swap", "final"]
    left: str
    right: str
    round_key: Optional[str] = None
    f_result: Optional[str] = None
    new_left: Optional[str] = None
    new_right: Optional[str] = None


class ResultView(_Frozen):
    type: Literal["result"] = "result"
    mode: Mode
    output: str
    left: Optional[str] = None
    right: Optional[str] = None
    route: Optional[Route] = None
    encodings: Optional[Tuple[LetterCode, ...]] = None


VisualData = Annotated[
    Union[
        EmptyView, TextView, SplitView, GridView, KeywordView,
        EncodingView, DecodingView, BinaryView, RoundView, ResultView,
    ],
    Field(discriminator="type"),
]


# ── steps and runs ───────────────────────────────────────────────────────────

class Step(_Frozen):
    description: str
    visual_data: VisualData

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class CipherRun(_Frozen):
    """The complete output of one generate_steps() call."""

    steps: Tuple[Step, ...] = ()
    result: str = ""

    @classmethod
    def empty(cls) -> "CipherRun":
        """Insufficient input: no steps, empty result."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def to_dict(self) -> dict:
        return {
            "steps":  [s.to_dict() for s in self.steps],
            "result": self.result,
        }


class StepTrace:
    """Append-only accumulator used while a generator runs."""

    def __init__(self):
        self._steps: List[Step] = []

    def add(self, description: str, view) -> None:
        self._steps.append(Step(description=description, visual_data=view))

    def build(self, result: str) -> CipherRun:
        return CipherRun(steps=tuple(self._steps), result=result)

    def __len__(self) -> int:
        return len(self._steps)


PLACEHOLDER = Step(
    description='Enter text and click "Run Animation"',
    visual_data=EmptyView(),
)
