"""Define type aliases purely for documentation purposes."""
import numpy as np
from typing import Sequence

# Sequences of a certain length.
Sequence4 = Sequence

# Numpy arrays of a certain shape. float implied.
Vector4 = np.ndarray # (4,)
