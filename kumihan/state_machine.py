from dataclasses import dataclass, field
from enum import Enum


SHORTHAND_PREFIXES = {".": "class", "#": "id"}


def is_name_char(c: str) -> bool:
    return c.isalnum() or c in ['-', '_']


class SegmentState(Enum):
    TAG = 1
    CLASS = 2
    ID = 3

    DONE = 4


@dataclass
class SegmentTokenizerStateMachine:
    """
    Reads the leading `tag.class#id` run of a line one character at a time.
    Each completed segment comes back from `feed` as a (kind, name) pair.
    The machine moves to DONE on the first character that cannot continue
    the run; that character is not consumed.
    """
    buffer: list[str] = field(default_factory=list)
    state: SegmentState = SegmentState.TAG

    """
    This method is used for only testing purposes.
    """
    def process_string(self, s: str) -> list[tuple[str, str]]:
        segments: list[tuple[str, str]] = []
        for c in s:
            tok = self.feed(c)
            if tok:
                segments.append(tok)
            if self.state == SegmentState.DONE:
                return segments
        tok = self.finish()
        if tok:
            segments.append(tok)
        return segments

    def flush_buffer(self) -> str:
        result = "".join(self.buffer)
        self.buffer = []
        return result

    def next_state(self, next_char: str) -> SegmentState:
        if self.state == SegmentState.DONE:
            return SegmentState.DONE
        elif next_char == '.':
            return SegmentState.CLASS
        elif next_char == '#':
            return SegmentState.ID
        elif is_name_char(next_char):
            # Tag names must start with a letter
            if (
                self.state == SegmentState.TAG
                and not self.buffer
                and not next_char.isalpha()
            ):
                return SegmentState.DONE
            return self.state

        return SegmentState.DONE

    def trigger_action(self, from_state: SegmentState) -> tuple[str, str] | None:
        value = self.flush_buffer()
        if from_state == SegmentState.TAG:
            return ("tag", value) if value else None
        elif from_state == SegmentState.CLASS:
            return ("class", value)
        elif from_state == SegmentState.ID:
            return ("id", value)

        return None

    def feed(self, c: str) -> tuple[str, str] | None:
        next_state = self.next_state(c)
        if self.state == SegmentState.DONE:
            return None

        result = None
        # A shorthand prefix always closes the segment before it
        if next_state != self.state or c in SHORTHAND_PREFIXES:
            result = self.trigger_action(self.state)

        self.state = next_state
        if next_state != SegmentState.DONE and c not in SHORTHAND_PREFIXES:
            self.buffer.append(c)

        return result

    def finish(self) -> tuple[str, str] | None:
        if self.state == SegmentState.DONE:
            return None
        result = self.trigger_action(self.state)
        self.state = SegmentState.DONE
        return result
