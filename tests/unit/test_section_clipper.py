"""
Section clipper tests.
"""
from app.models.internal_models import Coordinate, PointOfInterest
from app.services.section_clipper import buffer_size, clip_section, filter_relevant_places

# 0.2 km expressed in degrees of latitude on a 6371 km sphere
STEP_DEG = (2.0 / 9) / 111.19492664455873


def straight_line(n=10, step_deg=STEP_DEG):
    """n points heading south from Swanston St, evenly spaced."""
    return [Coordinate(-37.8100 - i * step_deg, 144.9660) for i in range(n)]


def beside(point, name="venue"):
    """A place ~25 m east of ``point``."""
    return PointOfInterest(name=name, coordinate=Coordinate(point.lat, point.lng + 0.0003))


def test_buffer_size_is_clamped():
    assert buffer_size(0) == 2
    assert buffer_size(10) == 2
    assert buffer_size(150) == 4
    assert buffer_size(1000) == 5


def test_clip_around_middle_places():
    line = straight_line()
    places = [beside(line[4], "a"), beside(line[5], "b")]
    result = clip_section(line, places)
    assert (result.start_index, result.end_index) == (2, 7)
    assert result.path == line[2:8]
    assert line[9] not in result.path
    assert result.relevant_places == places


def test_clip_is_clamped_to_valid_indices():
    line = straight_line()
    result = clip_section(line, [beside(line[0]), beside(line[1])])
    assert result.start_index == 0
    assert result.path == line[0:4]


def test_fewer_than_two_relevant_places_returns_input():
    line = straight_line()
    far = PointOfInterest(name="far", coordinate=Coordinate(line[5].lat, line[5].lng + 0.01))
    result = clip_section(line, [beside(line[5]), far])
    assert result.path == line
    assert result.relevant_places == [beside(line[5])]


def test_irrelevant_places_are_filtered():
    line = straight_line()
    near = beside(line[3])
    # ~175 m east: inside 300 m but outside the 150 m relevance threshold
    off_street = PointOfInterest(name="off", coordinate=Coordinate(line[3].lat, line[3].lng + 0.002))
    assert filter_relevant_places(line, [near, off_street]) == [near]


def test_clip_never_widens_or_reorders():
    line = straight_line(n=40)
    places = [beside(line[30]), beside(line[12]), beside(line[20])]
    result = clip_section(line, places)
    assert len(result.path) <= len(line)
    assert result.path == line[result.start_index:result.end_index + 1]
    assert result.start_index == 12 - buffer_size(40)
    assert result.end_index == 30 + buffer_size(40)
