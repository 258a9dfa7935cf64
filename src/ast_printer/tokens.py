"""
Token type code -> symbolic name lookup.

A `TokenNameTable` is built once from a "symbol source" (anything that enumerates named integer constants: a grammar's
token type module, a generated lexer class, an `IntEnum`, a plain mapping) and is read-only afterwards, so a single
table can be shared by any number of printers and threads.
"""
import enum
import logging
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from types import ModuleType
from typing import Any
from typing import Iterable
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from typing_extensions import Self

__all__ = ["SymbolSource", "TokenNameTable", "build_token_name_table", "resolve_token_name"]

logger = logging.getLogger(__name__)

SymbolSource = Union[Mapping[str, Any], ModuleType, type, Iterable[Tuple[str, Any]]]
"""Anything `build_token_name_table` knows how to enumerate"""

_INVALID_NAME = "<INVALID>"
"""Placeholder that ANTLR generated name lists use for unused slots"""


def _is_token_code(value: Any) -> bool:
    # bool is an int subclass, but True/False are never token codes
    return isinstance(value, int) and not isinstance(value, bool)


def _iter_symbols(symbol_source: SymbolSource) -> Iterator[Tuple[str, Any]]:
    """Yield (name, value) for every entry of the symbol source, whatever its value type"""
    if isinstance(symbol_source, Mapping):
        yield from symbol_source.items()
    elif isinstance(symbol_source, type) and issubclass(symbol_source, enum.Enum):
        for member in symbol_source:
            yield member.name, member.value
    elif isinstance(symbol_source, ModuleType):
        for name, value in vars(symbol_source).items():
            if not name.startswith("_"):
                yield name, value
    elif isinstance(symbol_source, type):
        # Base classes first, so a constant declared further down the hierarchy wins over an inherited one
        constants = {}
        for klass in reversed(symbol_source.__mro__):
            if klass is object:
                continue
            for name, value in vars(klass).items():
                if not name.startswith("_"):
                    constants.pop(name, None)
                    constants[name] = value
        yield from constants.items()
    elif isinstance(symbol_source, Iterable) and not isinstance(symbol_source, (str, bytes)):
        for name, value in symbol_source:
            yield name, value
    else:
        raise TypeError(f"Cannot enumerate token type constants from {type(symbol_source).__name__}")


@dataclass(frozen=True, eq=False)
class TokenNameTable(Mapping[int, str]):
    """
    Immutable mapping of token type code to symbolic name. Lookups of unknown codes through `resolve()` fall back to
    the decimal string of the code, so resolving never fails.
    """

    names_by_code: Mapping[int, str] = field(default_factory=dict)
    codes_by_name: Mapping[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        names_by_code = dict(self.names_by_code)
        object.__setattr__(self, "names_by_code", MappingProxyType(names_by_code))
        object.__setattr__(
            self, "codes_by_name", MappingProxyType({name: code for code, name in names_by_code.items()})
        )

    @classmethod
    def from_symbols(cls, symbol_source: SymbolSource) -> Self:
        """
        Build a table from the integer valued entries of symbol_source. Non-integer entries are skipped. If two names
        share the same code, the one enumerated last wins.
        """
        names_by_code = {}
        skipped = 0
        for name, value in _iter_symbols(symbol_source):
            if _is_token_code(value):
                names_by_code[int(value)] = name
            else:
                skipped += 1

        logger.debug(
            "Built token name table with %d entries (%d non-integer entries skipped)", len(names_by_code), skipped
        )
        return cls(names_by_code)

    @classmethod
    def from_names(cls, names: Sequence[Optional[str]]) -> Self:
        """
        Build a table from a name list indexed by code, such as the `symbolicNames` or `ruleNames` attribute of an
        ANTLR generated recognizer. Empty slots are left unregistered.
        """
        return cls({code: name for code, name in enumerate(names) if name and name != _INVALID_NAME})

    def resolve(self, code: int) -> str:
        name = self.names_by_code.get(code)
        if name is None:
            return str(int(code))
        return name

    def code_for(self, name: str) -> Optional[int]:
        """Reverse lookup. None if no constant with that name was registered"""
        return self.codes_by_name.get(name)

    def __getitem__(self, code: int) -> str:
        return self.names_by_code[code]

    def __len__(self) -> int:
        return len(self.names_by_code)

    def __iter__(self) -> Iterator[int]:
        return iter(self.names_by_code)

    def __contains__(self, code: object) -> bool:
        return code in self.names_by_code


def build_token_name_table(symbol_source: SymbolSource) -> TokenNameTable:
    return TokenNameTable.from_symbols(symbol_source)


def resolve_token_name(table: TokenNameTable, code: int) -> str:
    """Return the registered name for code, or its decimal string if there is none"""
    return table.resolve(code)
