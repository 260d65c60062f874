import numpy as np
import matplotlib.pyplot as plt

from .base import Backend


class MatplotlibBackend(Backend):
    name = "matplotlib"
    canvas_arg = "ax"

    def draw_shape(self, shape, ax=None, color="green", linewidth=2, fill=False, **_):
        if ax is None:
            fig, ax = plt.subplots()
        pts = shape.outline()
        closed = np.vstack([pts, pts[:1]])
        xs, ys = closed[:, 0], closed[:, 1]

        if fill:
            ax.fill(xs, ys, color=color, alpha=0.3)
        else:
            ax.plot(xs, ys, color=color, linewidth=linewidth)

        ax.set_aspect("equal")
        return ax
