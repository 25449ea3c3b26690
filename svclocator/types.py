from typing import Any, Dict, Sequence, Tuple

from typing_extensions import TypeAlias

Arg = Any
Kwargs = Dict[str, Arg]

# Ordered constructor parameter names, as declared.
ParameterNames: TypeAlias = Tuple[str, ...]
ParameterNamesLike: TypeAlias = Sequence[str]
