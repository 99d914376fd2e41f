# tlcalc/tl_waveforms.py
import logging
import numpy as np
import matplotlib.pyplot as plt
from .tl_core import sample_distribution
from .tl_report import format_vswr

logger = logging.getLogger(__name__)

def plot_envelopes(result, savepath, point_count=None):
    """Normalized |V| and |I| from generator (z=0) to load (z=l), with the
       standing-wave maxima/minima marked on the voltage curve."""
    s = sample_distribution(result, point_count)
    fig, ax = plt.subplots(figsize=(7,5))
    ax.plot(s.positions, s.voltage, label='|V(z)| (norm)')
    ax.plot(s.positions, s.current, label='|I(z)| (norm)')

    # extrema are stored as distances from the load
    z_max = result.length - np.array(result.voltage_max_positions)
    z_min = result.length - np.array(result.voltage_min_positions)
    ax.plot(z_max, np.ones_like(z_max), 'o', color='tab:blue', label='Vmax')
    ax.plot(z_min, np.full_like(z_min, s.voltage.min()), 'o', color='tab:red', label='Vmin')

    ax.set_xlabel('z from generator (m)')
    ax.set_ylabel('Magnitude (normalized)')
    ax.set_title(f'Envelopes (Voltage & Current) | VSWR={format_vswr(result.vswr)}')
    ax.legend()
    ax.grid(True, linestyle="--", alpha=0.6)
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)
    logger.info('wrote %s', savepath)

def plot_standing_wave(result, savepath):
    """Maxima/minima positions along the line, load at the right end."""
    l = result.length
    fig, ax = plt.subplots(figsize=(7,2.5))
    ax.hlines(0, 0, l, color='0.4', linewidth=3)
    for i, d in enumerate(result.voltage_max_positions):
        ax.plot(l - d, 0, 'o', color='tab:blue', markersize=8, label='Vmax' if i == 0 else None)
        ax.annotate(f'{d:.2f}', (l - d, 0), textcoords='offset points', xytext=(0, 10), ha='center')
    for i, d in enumerate(result.voltage_min_positions):
        ax.plot(l - d, 0, 'o', color='tab:red', markersize=8, label='Vmin' if i == 0 else None)
        ax.annotate(f'{d:.2f}', (l - d, 0), textcoords='offset points', xytext=(0, -16), ha='center')

    ax.set_xlim(-0.05*l, 1.05*l)
    ax.set_yticks([])
    ax.set_xlabel('z from generator (m)   [labels: distance from load]')
    ax.set_title('Standing wave maxima / minima')
    if result.voltage_max_positions or result.voltage_min_positions:
        ax.legend(loc='upper left')
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)
    logger.info('wrote %s', savepath)

def load_circles(result):
    """Centre and radius, in the Gamma plane, of the constant-r circle and the
       constant-x circle passing through the normalized load. x=0 has no circle (None)."""
    r, x = result.normalized_impedance.real, result.normalized_impedance.imag
    r_circle = ((r/(1 + r), 0.0), 1/(1 + r))
    x_circle = None if x == 0 else ((1.0, 1/x), 1/abs(x))
    return r_circle, x_circle

def plot_smith_chart(result, savepath):
    """Load point on its own r and x contours, with the constant-VSWR circle (radius |Gamma|).
       Vmax/Vmin are where that circle crosses the positive/negative real axis."""
    G = result.reflection_coefficient
    g = result.gamma_magnitude
    th = np.linspace(0, 2*np.pi, 600)
    (rc, rr), x_circle = load_circles(result)

    fig, ax = plt.subplots(figsize=(6,6))
    ax.plot(np.cos(th), np.sin(th), color='0.3', linewidth=1)
    ax.axhline(0, color='0.5', linewidth=0.5)
    ax.plot(rc[0] + rr*np.cos(th), rr*np.sin(th), color='tab:red', linewidth=0.8,
            label=f'r = {result.normalized_impedance.real:.3g}')
    if x_circle is not None:
        (xc, xr) = x_circle
        gx, gy = xc[0] + xr*np.cos(th), xc[1] + xr*np.sin(th)
        inside = np.hypot(gx, gy) <= 1 + 1e-9
        ax.plot(np.where(inside, gx, np.nan), np.where(inside, gy, np.nan), color='tab:blue',
                linewidth=0.8, label=f'x = {result.normalized_impedance.imag:.3g}')
    ax.plot(g*np.cos(th), g*np.sin(th), linestyle='--', color='tab:cyan',
            label=f'VSWR={format_vswr(result.vswr)}')
    ax.plot([g], [0], 's', color='tab:blue', label='Vmax')
    ax.plot([-g], [0], 's', color='tab:red', label='Vmin')
    ax.plot([G.real], [G.imag], 'o', color='gold', markeredgecolor='k', label='ZL')

    ax.set_aspect("equal", "box")
    ax.set_xlim(-1.05, 1.05)
    ax.set_ylim(-1.05, 1.05)
    ax.set_xlabel("Re{Γ}")
    ax.set_ylabel("Im{Γ}")
    ax.set_title('Smith Chart (Γ-plane)')
    ax.legend(loc='lower left', fontsize='small')
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)
    logger.info('wrote %s', savepath)
