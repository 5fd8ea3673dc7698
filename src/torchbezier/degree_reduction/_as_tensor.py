from typing import Optional, Sequence

import torch
from torch import Tensor


def as_tensor(
    rows: Sequence[Sequence],
    columns: int,
    *,
    dtype: torch.dtype,
    device: Optional[torch.device],
) -> Tensor:
    """Round an exact ``len(rows) x columns`` matrix once into ``dtype``."""
    values = [[float(value) for value in row] for row in rows]

    return (
        torch.tensor(values, dtype=torch.float64, device=device)
        .reshape(len(rows), columns)
        .to(dtype)
    )
