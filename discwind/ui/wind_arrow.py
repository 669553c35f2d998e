# ABOUTME: SVG wind arrow showing wind relative to the throw direction
# ABOUTME: Throw always points up; arrow color and length scale with wind speed

import math

from discwind.weather.compass import relative_wind_angle


class WindArrowGraph:
    """
    Generates a compass-style SVG with the wind arrow drawn relative to the throw.

    The throw marker sits at the top of the ring. The wind arrow is rotated by
    the angle between the wind direction and the throw direction.
    """

    # (upper bound mph exclusive, color, length as a fraction of size)
    SPEED_BANDS = (
        (5.0, "green", 0.3),
        (10.0, "gold", 0.5),
        (15.0, "orange", 0.7),
    )
    STRONG_WIND = ("red", 0.9)

    def __init__(self, size: int = 120):
        self.size = size

    def render(self, wind_direction: str, throw_direction: str, wind_speed: float) -> str:
        center = self.size / 2
        radius = self.size / 2 - 2
        color, length_ratio = self._style_for_speed(wind_speed)
        angle = relative_wind_angle(wind_direction, throw_direction)

        elements = [
            f'<circle cx="{center:.1f}" cy="{center:.1f}" r="{radius:.1f}" fill="white" stroke="#ccc" stroke-width="1"/>'
        ]
        elements.extend(self._make_compass_marks(center, radius))
        elements.append(self._make_throw_marker(center))
        elements.extend(self._make_wind_arrow(center, angle, self.size * length_ratio, color))

        return (
            f'<svg width="{self.size}" height="{self.size}" xmlns="http://www.w3.org/2000/svg">'
            f'<title>Wind relative to throw</title>'
            f'{"".join(elements)}'
            f'</svg>'
        )

    def _style_for_speed(self, wind_speed: float) -> tuple[str, float]:
        for upper, color, ratio in self.SPEED_BANDS:
            if wind_speed < upper:
                return color, ratio
        return self.STRONG_WIND

    def _make_straight_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = "blue",
        stroke_width: int = 3
    ) -> str:
        """Generate a straight line."""
        x1, y1 = start
        x2, y2 = end
        return f'<path d="M {x1:.1f} {y1:.1f} L {x2:.1f} {y2:.1f}" stroke="{color}" stroke-width="{stroke_width}" fill="none" stroke-linecap="round" stroke-linejoin="round"/>'

    def _make_compass_marks(self, center: float, radius: float) -> list[str]:
        """Eight tick marks around the ring, every 45°."""
        marks = []
        for index in range(8):
            # SVG y axis points down, so 0° (up) is -90° in screen angles
            angle_rad = math.radians(index * 45 - 90)
            outer = (center + radius * math.cos(angle_rad), center + radius * math.sin(angle_rad))
            inner = (center + (radius - 8) * math.cos(angle_rad), center + (radius - 8) * math.sin(angle_rad))
            marks.append(self._make_straight_line(inner, outer, color="#bbb", stroke_width=2))
        return marks

    def _make_throw_marker(self, center: float) -> str:
        """Blue triangle at the top of the ring; the throw always points up."""
        top = 6
        return (
            f'<polygon points="{center:.1f},{top} {center - 4:.1f},{top + 12} {center + 4:.1f},{top + 12}" '
            f'fill="blue"/>'
        )

    def _make_wind_arrow(self, center: float, angle_deg: float, length: float, color: str) -> list[str]:
        """Wind line through the center with an arrow head."""
        angle_rad = math.radians(angle_deg - 90)
        half = length / 2

        start = (center - half * math.cos(angle_rad), center - half * math.sin(angle_rad))
        end = (center + half * math.cos(angle_rad), center + half * math.sin(angle_rad))

        head_size = 10
        head1_end = (
            end[0] + head_size * math.cos(angle_rad + math.radians(150)),
            end[1] + head_size * math.sin(angle_rad + math.radians(150))
        )
        head2_end = (
            end[0] + head_size * math.cos(angle_rad - math.radians(150)),
            end[1] + head_size * math.sin(angle_rad - math.radians(150))
        )

        return [
            self._make_straight_line(start, end, color=color, stroke_width=4),
            self._make_straight_line(end, head1_end, color=color, stroke_width=3),
            self._make_straight_line(end, head2_end, color=color, stroke_width=3),
        ]
