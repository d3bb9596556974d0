import io
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import imageio.v2 as imageio
from maze_generator import to_grid


def plot_maze(cells, ax=None, title=None):
    """Draw a maze (array of cell flags) on a matplotlib axis"""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(to_grid(cells), cmap="binary")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)
    return ax


def save_maze_image(cells, path, title=None):
    """Save a finished maze as a PNG image"""
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_maze(cells, ax=ax, title=title)
    plt.tight_layout()
    plt.savefig(path)
    plt.close(fig)


def save_generation_gif(frames, path, duration=0.2):
    """
    Save an animated GIF showing the maze growing row by row.

    Each frame is the (rows so far, width) array of cell flags after a row
    was generated. Frames are padded to the full maze height with unconnected
    cells so every image has the same size.
    """
    if not frames:
        raise ValueError("At least one frame is required to make a GIF")

    height = max(frame.shape[0] for frame in frames)
    width = frames[0].shape[1]
    images = []
    for i, frame in enumerate(frames):
        padded = np.zeros((height, width), dtype=np.uint8)
        padded[:frame.shape[0]] = frame
        fig, ax = plt.subplots(figsize=(8, 8))
        plot_maze(padded, ax=ax, title=f"Row {i + 1}/{len(frames)}")
        buf = io.BytesIO()
        plt.savefig(buf, format="png")
        buf.seek(0)
        images.append(imageio.imread(buf))
        plt.close(fig)

    imageio.mimsave(path, images, duration=duration)
