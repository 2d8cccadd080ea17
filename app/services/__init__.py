# Business logic services

from .geo import distance, polyline_length, centroid
from .segment_merger import merge_segments
from .place_clusterer import densest_cluster
from .section_clipper import clip_section, filter_relevant_places
from .length_trimmer import trim_to_length
from .places_client import PlacesClient
from .overpass_client import OverpassClient
from .street_service import StreetReconstructionService, get_street_service

__all__ = [
    "distance",
    "polyline_length",
    "centroid",
    "merge_segments",
    "densest_cluster",
    "clip_section",
    "filter_relevant_places",
    "trim_to_length",
    "PlacesClient",
    "OverpassClient",
    "StreetReconstructionService",
    "get_street_service",
]
