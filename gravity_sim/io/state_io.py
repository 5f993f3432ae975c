"""State I/O for saving and loading body lists.

Save files are CSV, one body per line:

    #x, y, xVel, yVel, mass, radius, red, green, blue
    12.5,-3.0,0.1,0.0,4.0,2.0,200,10,30

Lines starting with ``#`` and blank lines are ignored on load.
"""

import csv
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np

from gravity_sim.physics.body import Body, BodyParseError

logger = logging.getLogger(__name__)

HEADER = "#x, y, xVel, yVel, mass, radius, red, green, blue"


def save_state(bodies: Iterable[Optional[Body]], output_path: str) -> bool:
    """Save live bodies to a CSV save file.

    Absorbed (None) slots are skipped. A file that cannot be written is
    not fatal: the failure is logged and the previous file, if any, is
    left as it was.

    Args:
        bodies: Bodies or slots to save
        output_path: Output file path

    Returns:
        True if the file was written
    """
    output_path = Path(output_path)
    # The previous save survives a failed write
    partial_path = output_path.with_name(output_path.name + ".partial")
    try:
        with open(partial_path, 'w', newline='') as f:
            f.write(HEADER + "\n")
            writer = csv.writer(f, lineterminator="\n")
            for body in bodies:
                if body is not None:
                    writer.writerow(body.to_fields())
            f.write("\n")
        os.replace(partial_path, output_path)
    except OSError as err:
        if partial_path.is_file():
            partial_path.unlink()
        logger.warning("Cannot save state to %s: %s", output_path, err)
        return False

    logger.info("Saved state to %s", output_path)
    return True


def load_state(input_path: str, rng: Optional[np.random.Generator] = None) -> List[Body]:
    """Load bodies from a CSV save file.

    Args:
        input_path: Input file path
        rng: Random generator for colors of records without color fields

    Returns:
        List of bodies in file order

    Raises:
        OSError: If the file cannot be read
        BodyParseError: If a record has too few fields or a non-numeric field
    """
    input_path = Path(input_path)
    rng = rng if rng is not None else np.random.default_rng()

    bodies = []
    with open(input_path, 'r', newline='') as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or row[0].lstrip().startswith('#'):
                continue
            if all(not field.strip() for field in row):
                continue
            try:
                bodies.append(Body.from_fields(row, rng=rng))
            except BodyParseError as err:
                raise BodyParseError(f"{input_path}:{reader.line_num}: {err}") from err

    logger.info("Loaded %d bodies from %s", len(bodies), input_path)
    return bodies


def format_state(simulator, screen_width: float, screen_height: float) -> str:
    """Render live bodies and view settings as a text table.

    Args:
        simulator: Simulator to describe
        screen_width: Screen width used for the visible limits
        screen_height: Screen height used for the visible limits

    Returns:
        Multi-line table
    """
    rule = "-" * 80
    lines = [
        rule,
        f"{'Body Index':<12} {'x':>10} {'y':>10} {'xVel':>8} {'yVel':>8} "
        f"{'mass':>8} {'radius':>8}  color",
    ]
    for i, body in enumerate(simulator.slots):
        if body is None:
            continue
        lines.append(
            f"{'BODY ' + str(i):<12} {body.x:>10.2f} {body.y:>10.2f} "
            f"{body.x_vel:>8.2f} {body.y_vel:>8.2f} {body.mass:>8.2f} "
            f"{body.radius:>8.2f}  {body.color}"
        )

    view = simulator.view
    x_min, x_max, y_min, y_max = view.visible_bounds(screen_width, screen_height)
    lines += [
        rule,
        f"{'PAUSED':<16} {view.paused}",
        f"{'TIMESCALE':<16} {view.timescale:.2f}",
        f"{'ZOOMSCALE':<16} {view.zoomscale:.2f}",
        f"{'MOVESCALE':<16} {view.movescale:.2f}",
        f"{'SCREEN CENTER':<16} ({view.center_x:.2f}, {view.center_y:.2f})",
        f"{'SCREEN LIMITS':<16} X: {x_min:.0f} - {x_max:.0f},  Y: {y_min:.0f} - {y_max:.0f}",
    ]
    return "\n".join(lines)
