"""Parser for the translator's own serialized collections."""

from typing import Any

from ..errors import FormatError
from ..tokens import DesignToken, NotationTag
from .base import TokenParser


class ManualTokenParser(TokenParser):
    """Parser for ``{"name": ..., "tokens": [...]}`` documents."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.MANUAL

    def parse(self, root: Any, prefix: str = "") -> list[DesignToken]:
        if not isinstance(root, dict) or not isinstance(root.get("tokens"), list):
            raise FormatError('expected a "tokens" list', self.notation.value)

        tokens = []
        for index, entry in enumerate(root["tokens"]):
            if not isinstance(entry, dict) or "name" not in entry or "value" not in entry:
                raise FormatError(
                    f"token #{index} needs a name and a value", self.notation.value
                )
            token = DesignToken.from_dict(entry)
            if prefix:
                token = DesignToken.from_dict({**entry, "name": f"{prefix}/{token.name}"})
            tokens.append(token)
        return tokens
