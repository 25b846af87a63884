# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Command-line interface.

Usage:
    lorenzanim [global-options] <command> [options]

Examples:
    lorenzanim animate -o lorenz_animation.gif --frames 360
    lorenzanim image -o lorenz_attractor.png --iterations 50000
    lorenzanim sensitivity --perturbation 1e-4
    lorenzanim preview --frames 300
"""

import logging

import click

from lorenzanim.animation.driver import (
    create_animation,
    render_attractor_image,
    run_ascii_preview,
    sensitivity_report,
)
from lorenzanim.animation.encoders import save_rgb_image
from lorenzanim.config import (
    DEFAULT_BETA,
    DEFAULT_DT,
    DEFAULT_RHO,
    DEFAULT_SIGMA,
    DEFAULT_WARMUP_STEPS,
    AnimationConfig,
    LorenzParameters,
    PreviewConfig,
    SimulationConfig,
    StaticImageConfig,
)
from lorenzanim.logging_config import setup_logging
from lorenzanim.rendering.palette import DEFAULT_BACKGROUND, hex_to_rgb

logger = logging.getLogger(__name__)


def simulation_options(f):
    """Decorator adding the Lorenz parameters and integration step."""
    f = click.option("--sigma", default=DEFAULT_SIGMA, type=float, show_default=True,
                     help="Prandtl number")(f)
    f = click.option("--rho", default=DEFAULT_RHO, type=float, show_default=True,
                     help="Rayleigh number")(f)
    f = click.option("--beta", default=DEFAULT_BETA, type=float, show_default=True,
                     help="Geometric factor")(f)
    f = click.option("--dt", default=DEFAULT_DT, type=float, show_default=True,
                     help="Integration time step")(f)
    f = click.option("--warmup", default=DEFAULT_WARMUP_STEPS, type=int, show_default=True,
                     help="Transient steps discarded before drawing")(f)
    return f


def _validate_color(ctx, param, value):
    try:
        hex_to_rgb(value)
    except ValueError as e:
        raise click.BadParameter(str(e))
    return value


def _build_config(factory, **kwargs):
    try:
        return factory(**kwargs)
    except ValueError as e:
        raise click.UsageError(str(e))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write logs to this file")
def cli(verbose, log_file):
    """Lorenz attractor simulation and animation."""
    setup_logging(logging.DEBUG if verbose else logging.INFO, log_file)


@cli.command("animate")
@click.option("--output", "-o", default="lorenz_animation.gif", type=click.Path(dir_okay=False),
              show_default=True, help="Output GIF file")
@click.option("--width", "-w", default=800, type=int, show_default=True, help="Frame width")
@click.option("--height", "-H", default=600, type=int, show_default=True, help="Frame height")
@click.option("--frames", "-f", default=360, type=int, show_default=True,
              help="Number of frames")
@click.option("--trail", default=2000, type=int, show_default=True,
              help="Trail capacity in points")
@click.option("--substeps", default=10, type=int, show_default=True,
              help="Integration steps per frame")
@click.option("--delay", default=1, type=int, show_default=True,
              help="Frame delay in hundredths of a second")
@click.option("--background", default=DEFAULT_BACKGROUND, callback=_validate_color,
              show_default=True, help="Background color (hex)")
@simulation_options
def cmd_animate(output, width, height, frames, trail, substeps, delay, background,
                sigma, rho, beta, dt, warmup):
    """Render the fading-trail animation to a GIF."""
    simulation = _build_config(
        SimulationConfig,
        parameters=_build_config(LorenzParameters, sigma=sigma, rho=rho, beta=beta),
        dt=dt,
        trail_capacity=trail,
    )
    config = _build_config(
        AnimationConfig,
        width=width,
        height=height,
        frame_count=frames,
        warmup_steps=warmup,
        substeps=substeps,
        frame_delay=delay,
        simulation=simulation,
    )
    if config.frame_count == 0:
        raise click.UsageError("--frames must be at least 1 to write an animation")

    try:
        path = create_animation(config, output, background=background)
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e}")
    click.echo(f"Animation saved as {path}")


@cli.command("image")
@click.option("--output", "-o", default="lorenz_attractor.png", type=click.Path(dir_okay=False),
              show_default=True, help="Output image file")
@click.option("--width", "-w", default=800, type=int, show_default=True, help="Image width")
@click.option("--height", "-H", default=600, type=int, show_default=True, help="Image height")
@click.option("--iterations", "-n", default=50000, type=int, show_default=True,
              help="Number of plotted points")
@simulation_options
def cmd_image(output, width, height, iterations, sigma, rho, beta, dt, warmup):
    """Render a dense static image of the attractor."""
    simulation = _build_config(
        SimulationConfig,
        parameters=_build_config(LorenzParameters, sigma=sigma, rho=rho, beta=beta),
        dt=dt,
        trail_capacity=1,
    )
    config = _build_config(
        StaticImageConfig,
        width=width,
        height=height,
        iterations=iterations,
        warmup_steps=warmup,
        simulation=simulation,
    )
    image = render_attractor_image(config)
    try:
        path = save_rgb_image(image, output)
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e}")
    click.echo(f"Lorenz attractor saved as {path}")


@cli.command("sensitivity")
@click.option("--perturbation", "-p", default=1e-4, type=float, show_default=True,
              help="Offset added to x0 of the second system")
@click.option("--samples", default=20, type=click.IntRange(min=0), show_default=True,
              help="Rows to print")
@click.option("--stride", default=100, type=click.IntRange(min=0), show_default=True,
              help="Steps skipped between rows")
def cmd_sensitivity(perturbation, samples, stride):
    """Show two nearly identical trajectories drifting apart."""
    result = sensitivity_report(perturbation=perturbation, samples=samples, stride=stride)

    click.echo(f"Initial difference: {result['initial_difference']:.6f}")
    click.echo("Time\tSystem1_X\tSystem2_X\tDifference")
    click.echo("----\t---------\t---------\t----------")
    for row in result["samples"]:
        click.echo(
            f"{row['time']:.2f}\t{row['x_reference']:9.4f}\t"
            f"{row['x_perturbed']:9.4f}\t{row['difference']:10.6f}"
        )


@cli.command("preview")
@click.option("--frames", "-f", default=1000, type=click.IntRange(min=0), show_default=True,
              help="Number of frames")
@click.option("--columns", default=80, type=int, show_default=True, help="Canvas width")
@click.option("--rows", default=24, type=int, show_default=True, help="Canvas height")
@click.option("--delay", default=0.03, type=float, show_default=True,
              help="Pause between frames in seconds")
def cmd_preview(frames, columns, rows, delay):
    """Play an ASCII animation in the terminal."""
    config = _build_config(
        PreviewConfig, columns=columns, rows=rows, frame_count=frames, delay=delay
    )
    run_ascii_preview(config)


if __name__ == "__main__":
    cli()
