from .option import Option, Some, Nothing, NONE, some, none, from_nullable
from .result import Result, Ok, Err, attempt
from .errors import OptionError, UnwrapError
from .combinators import (
    is_some,
    is_none,
    unwrap,
    expect,
    unwrap_or,
    unwrap_or_default,
    unwrap_or_else,
    to_nullable,
    map,
    try_map,
    map_or,
    try_map_or,
    map_or_else,
    try_map_or_else,
    and_,
    and_then,
    or_,
    or_else,
    xor,
    filter,
    equals,
    flatten,
    zip,
    ok_or,
    ok_or_else,
    from_result,
)
from .logger import ConsoleLogger, get_logger, set_logger
from .config import Settings, load_settings
