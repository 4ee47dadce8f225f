from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:  # pragma: no cover
    from .types import ApplicationState

# typing only
FloatArray: TypeAlias = NDArray[np.floating]
Listener: TypeAlias = Callable[["ApplicationState"], None]
