import imageio.v2 as imageio
import pytest

from maze_generator import generate_maze
from vis import plot_maze, save_generation_gif, save_maze_image


def test_save_maze_image(tmp_path):
    path = tmp_path / "maze.png"
    save_maze_image(generate_maze(6, 4, seed=0), str(path), title="6x4 maze")
    image = imageio.imread(path)
    assert image.ndim == 3


def test_save_generation_gif(tmp_path):
    cells = generate_maze(4, 3, seed=0)
    frames = [cells[:i + 1] for i in range(3)]
    path = tmp_path / "maze.gif"
    save_generation_gif(frames, str(path), duration=0.1)
    assert len(imageio.mimread(path)) == 3


def test_gif_needs_frames(tmp_path):
    with pytest.raises(ValueError):
        save_generation_gif([], str(tmp_path / "empty.gif"))


def test_plot_maze_draws_grid():
    ax = plot_maze(generate_maze(3, 3, seed=1))
    image = ax.get_images()[0]
    assert image.get_array().shape == (7, 7)
