from .lds import (
    TWO_PI,
    vdc,
    VanDerCorput,
    Circle2D,
    Disk,
    Halton,
    Sphere3D,
    Hopf4D,
)
from .lds_n import HaltonN, CylinN, SphereN, Sphere3, get_tp
from .params import SequenceParams
from .api import make_generator, sample, generate_points
from .io import save_points_json, load_points_json
from .utils import PRIME_TABLE, first_primes, halton_batch, vdc_batch

__all__ = [
    "TWO_PI",
    "vdc",
    "VanDerCorput",
    "Circle2D",
    "Disk",
    "Halton",
    "Sphere3D",
    "Hopf4D",
    "HaltonN",
    "CylinN",
    "SphereN",
    "Sphere3",
    "get_tp",
    "SequenceParams",
    "make_generator",
    "sample",
    "generate_points",
    "save_points_json",
    "load_points_json",
    "PRIME_TABLE",
    "first_primes",
    "halton_batch",
    "vdc_batch",
]
