"""propgen: composable random-value generators for property-based testing.

A `Generator[T]` produces `Some(value)` or `Nothing` on each `generate()`
call. Combinators build generators from values and other generators.

Flat imports (preferred):
    from propgen import Generator, Some, Nothing, Lazy
    from propgen import never, pure, one_of, frequency, recursive

Submodule imports (for organization):
    from propgen.maybe import Some, Nothing, Maybe
    from propgen.generators import sequence_of, frequency_of_values
    from propgen.sampling import seeded_sampler
"""

from propgen._config import GeneratorConfig, get_config, init
from propgen._logging import configure_logging, get_logger
from propgen.errors import EmptyValue, EmptyValueError
from propgen.generator import Generator
from propgen.generators import (
    choose,
    frequency,
    frequency_of_values,
    never,
    one_of,
    one_of_values,
    pure,
    recursive,
    sequence_of,
    sequence_of_values,
)
from propgen.lazy import Lazy
from propgen.maybe import Maybe, Nothing, NothingType, Some
from propgen.sampling import Sampler, get_sampler, seeded_sampler, set_sampler

__all__ = [
    # Errors
    'EmptyValue',
    'EmptyValueError',
    # Core types
    'Generator',
    # Configuration
    'GeneratorConfig',
    'Lazy',
    'Maybe',
    'Nothing',
    'NothingType',
    # Random source
    'Sampler',
    'Some',
    # Combinators
    'choose',
    # Logging
    'configure_logging',
    'frequency',
    'frequency_of_values',
    'get_config',
    'get_logger',
    'get_sampler',
    'init',
    'never',
    'one_of',
    'one_of_values',
    'pure',
    'recursive',
    'seeded_sampler',
    'sequence_of',
    'sequence_of_values',
    'set_sampler',
]
