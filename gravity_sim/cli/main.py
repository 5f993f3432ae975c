"""CLI main entry point."""

import argparse
import logging
import sys
import time

import yaml

from gravity_sim.io.state_io import format_state, load_state, save_state
from gravity_sim.physics.body import BodyParseError
from gravity_sim.physics.diagnostics import kinetic_energy, live_count, total_mass
from gravity_sim.physics.simulator import Simulator
from gravity_sim.presets import RandomField
from gravity_sim.ui.controls import Controls
from gravity_sim.utils.config import Config, ViewState, load_config
from gravity_sim.utils.reproducibility import make_rng

CONTROLS_HELP = """
Controls:
    W/A/S/D     : Move view window up/left/down/right
    Q/E         : Zoom out/in
    Up/Down     : Increase/decrease the rate of view window movement
    Left/Right  : Decrease/increase the speed of the simulation
    Space       : Toggle pause/resume
    X           : Toggle particle trails
    C           : Advance a single timestep (without unpausing)
    P           : Print the current state of the simulation
    O           : Save the current state of the simulation
"""


def build_config(args) -> Config:
    """Merge an optional config file with command line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'save_file': args.save_file,
        'num_bodies': args.num_bodies,
        'seed': args.seed,
        'timescale': args.timescale,
        'G': args.G,
        'output_path': args.output,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config


def initial_bodies(config: Config):
    """Load bodies from the save file, or seed them randomly."""
    if config.save_file:
        print(f"Loading from file {config.save_file}")
        return load_state(config.save_file, rng=make_rng(config.seed))

    print(f"No load file, using num_bodies = {config.num_bodies}")
    half_width, half_height = config.half_extent
    preset = RandomField(
        config.num_bodies,
        seed=config.seed,
        half_width=half_width,
        half_height=half_height,
        velocity_limit=config.velocity_limit,
        mass_limit=config.mass_limit,
    )
    return preset.generate()


def run_headless(sim: Simulator, args):
    """Run a fixed number of steps, printing a status line periodically."""
    print(f"{'Step':<8} {'Time':<10} {'Bodies':<8} {'Mass':<12} {'K':<12}")
    print("-" * 54)
    for step in range(args.steps + 1):
        if step % args.print_every == 0 or step == args.steps:
            slots = sim.slots
            print(
                f"{step:<8} {sim.time:<10.2f} {live_count(slots):<8} "
                f"{total_mass(slots):<12.2f} {kinetic_energy(slots):<12.2f}"
            )
        if step < args.steps:
            sim.step()


def run_interactive(sim: Simulator, config: Config):
    """Frame loop: handle input, step if running, render current."""
    from gravity_sim.render.renderer_2d import Renderer2D

    renderer = Renderer2D(
        screen_width=config.screen_width,
        screen_height=config.screen_height,
        pixel_decay_rate=config.pixel_decay_rate,
    )
    controls = Controls(sim, config, on_view_change=renderer.clear)
    renderer.connect_keys(controls.handle_key)
    print(CONTROLS_HELP)

    import matplotlib.pyplot as plt

    frame_time = config.frame_time_ms / 1000.0
    while renderer.is_open():
        stepped = sim.tick()
        renderer.render(sim.bodies, sim.view, stepped=stepped)
        plt.pause(frame_time)
    renderer.close()


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Gravity simulation - N-body gravity with inelastic merging",
        epilog=CONTROLS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--save-file', type=str, default=None,
                        help='CSV save file to load. If not set, bodies are seeded randomly')
    parser.add_argument('--num-bodies', type=int, default=None,
                        help='Number of bodies to seed randomly (default: 5)')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml); flags override its values')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--timescale', type=float, default=None,
                        help='Initial timestep (default: 0.25)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 100)')
    parser.add_argument('--output', type=str, default=None,
                        help='Save file written at startup and on save (default: save.csv)')
    parser.add_argument('--steps', type=int, default=100,
                        help='Number of steps to run without rendering')
    parser.add_argument('--print-every', type=int, default=10,
                        help='Print a status line every N steps')
    parser.add_argument('--render', action='store_true',
                        help='Open the interactive viewer instead of running headless')
    parser.add_argument('--print-state', action='store_true',
                        help='Print the full body table when finished')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log loading and saving')

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.print_every < 1:
        parser.error("--print-every must be at least 1")

    try:
        config = build_config(args)
        bodies = initial_bodies(config)
    except (OSError, ValueError, yaml.YAMLError) as err:
        # Covers BodyParseError: no partial simulation is started
        kind = "Malformed save file" if isinstance(err, BodyParseError) else "Cannot start"
        print(f"ERROR: {kind}: {err}")
        sys.exit(1)

    view = ViewState.from_config(config)
    sim = Simulator(bodies, view=view, G=config.G)

    # Keep the starting configuration so the run can be repeated
    save_state(sim.slots, config.output_path)

    if args.render:
        run_interactive(sim, config)
    else:
        started = time.perf_counter()
        run_headless(sim, args)
        print(f"Simulation complete in {time.perf_counter() - started:.2f}s")

    if args.print_state:
        print(format_state(sim, config.screen_width, config.screen_height))


if __name__ == '__main__':
    main()
