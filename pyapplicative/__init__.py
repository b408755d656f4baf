""" imports for pyapplicative """
from .applicative import Applicative, Pointed, ap, ensure_same_family
from .chain import Chain, ap_from_bind, compose_kleisli
from .config import Settings, load_settings
from .curry import Curried, curry, curry2, curry3, curried
from .either import Either, Left, Right, attempt, either
from .identity import Identity
from .functor import Functor, map, identity, compose, compose_all #pylint: disable=redefined-builtin
from .io import IO
from .laws import LawReport, LawResult, LawSamples, check_applicative_laws, \
    check_composition, check_homomorphism, check_identity, \
    check_interchange, check_map_composition, check_map_identity
from .lift import lift_a2, lift_a3, lift_a4
from .log import configure_logging
from .maybe import Maybe, Just, Nothing, from_maybe, maybe
from .semigroup import Semigroup
from .task import Task, Rejected
from .traverse import traverse, sequence
from .validation import V, Errors, Valid, Invalid
