"""
Comparing Interpolation Modes
=============================

.. currentmodule:: approx1d

This example shows how the same samples are interpolated by each of the
:class:`InterpolationMode` values, for a function which is hard for polynomials.
"""

import matplotlib.pyplot as plt
import numpy as np
from approx1d import Interpolation1D, InterpolationMode, SampleList

# %%
#
# Samples of Runge's Function
# ---------------------------
#
# The function :math:`f(t) = \frac{1}{1 + 25 t^2}` is smooth, but interpolating it
# with a single polynomial through equally spaced samples gives large oscillations
# close to the ends of the domain.


def runge(t):
    """Compute Runge's function."""
    return 1 / (1 + 25 * t**2)


t = np.linspace(-1, 1, 11)
samples = SampleList(t, runge(t))

# %%
#
# Interpolation
# -------------
#
# All interpolations share the same :class:`SampleList`. The polynomial is
# evaluated once through all samples and once with the order limited to four, which
# keeps it local.

interpolations = {
    "polynomial": Interpolation1D(samples),
    "polynomial (order 4)": Interpolation1D(samples, maximum_order=4),
    "rational": Interpolation1D(samples, algorithm=InterpolationMode.EXPECT_POLES),
    "natural spline": Interpolation1D(samples, algorithm=InterpolationMode.SMOOTH),
}

tplt = np.linspace(-1, 1, 401)
fig, ax = plt.subplots()
ax.plot(tplt, runge(tplt), color="black", label="exact")
for name, interp in interpolations.items():
    ax.plot(tplt, [interp(v) for v in tplt], label=name)
ax.scatter(samples.t, samples.x, color="black", marker="o")
ax.set(xlabel="$t$", ylabel="$f(t)$", ylim=(-0.5, 1.5))
ax.legend()
ax.grid()
fig.tight_layout()
plt.show()

# %%
#
# Changing Samples
# ----------------
#
# Adding a sample updates all interpolations using the samples the next time they
# are evaluated.

samples.add(0.05, runge(0.05))
for name, interp in interpolations.items():
    print(f"{name:>22}: {interp(0.025):+.6f} (exact {runge(0.025):+.6f})")
