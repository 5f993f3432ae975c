"""Perfectly inelastic merging of overlapping bodies."""

from typing import Optional

from gravity_sim.physics.body import Body, mass_to_radius


class CollisionResolver:
    """Mass-weighted merge policy.

    Each body resolves its own collision independently: the lighter body
    of a pair returns None (absorbed) while the heavier one returns the
    merged body. At equal mass the body in the higher slot is absorbed, so
    a pair always leaves exactly one survivor.

    With three or more bodies overlapping in the same step each body only
    merges with its first overlapping partner. In a chain where A overlaps
    B and B overlaps C but A and C are apart, A absorbs B while B is
    absorbed into A and C into B, so the mass of C is lost for good.
    Total mass is only conserved when the pairs merging in a step are
    disjoint.
    """

    def absorbs(self, index: int, body: Body, partner_index: int, partner: Body) -> bool:
        """Return True if ``body`` is swallowed by ``partner``."""
        if body.mass < partner.mass:
            return True
        return body.mass == partner.mass and index > partner_index

    def resolve(
        self,
        index: int,
        body: Body,
        partner_index: int,
        partner: Body,
    ) -> Optional[Body]:
        """Merge ``partner`` into ``body``.

        Args:
            index: Slot of the body being updated
            body: Body being updated, already advanced this step
            partner_index: Slot of the overlapping body
            partner: Overlapping body from the current buffer

        Returns:
            None if the body is absorbed, else the merged body which keeps
            the color of ``body``
        """
        if self.absorbs(index, body, partner_index, partner):
            return None

        total = body.mass + partner.mass
        return Body(
            x=(body.x * body.mass + partner.x * partner.mass) / total,
            y=(body.y * body.mass + partner.y * partner.mass) / total,
            x_vel=(body.x_vel * body.mass + partner.x_vel * partner.mass) / total,
            y_vel=(body.y_vel * body.mass + partner.y_vel * partner.mass) / total,
            mass=total,
            radius=mass_to_radius(total),
            color=body.color,
        )
