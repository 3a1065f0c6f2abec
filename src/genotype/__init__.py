"""Indexable, range-bounded genotypes for nested phenotype structures.

Genes can be indexed, iterated or modified in place independently of the
phenotype that holds them.
"""

from .base import (
    CompositeHolder,
    Param,
    ParamHolder,
    RangedParam,
    RangedValue,
    clamp,
)
from .config import MutationConfig
from .errors import BorrowError, ContractViolation, ParamIndexError
from .factory import generator_from_config, make_generator
from .genes import get_genes, iter_params, set_genes, validate_holder
from .mutation import (
    ConstantGenerator,
    GaussianGenerator,
    MutationGenerator,
    SequenceGenerator,
    UniformGenerator,
    mutate,
)
from .param_set import ParamGroup, ParamSet, ParamSet2d, ParamSet3d
from .shared import Shared

__version__ = "0.1.0"

__all__ = [
    "Param",
    "RangedValue",
    "ParamHolder",
    "RangedParam",
    "CompositeHolder",
    "clamp",
    "ParamSet",
    "ParamSet2d",
    "ParamSet3d",
    "ParamGroup",
    "Shared",
    "MutationGenerator",
    "ConstantGenerator",
    "UniformGenerator",
    "GaussianGenerator",
    "SequenceGenerator",
    "mutate",
    "MutationConfig",
    "make_generator",
    "generator_from_config",
    "iter_params",
    "get_genes",
    "set_genes",
    "validate_holder",
    "ContractViolation",
    "ParamIndexError",
    "BorrowError",
]
