import quart
import typing
import functools
import asyncio
import json
import os

def async_function(func: typing.Callable):
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        if len(kwargs) == 0:
            return await loop.run_in_executor(None, func, *args)
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))
    return wrapper

@async_function
def run_async(func: typing.Callable, *args, **kwargs):
    return func(*args, **kwargs)

def abort_json(status_code: int, data: typing.Union[typing.Dict[str, typing.Any], typing.List[typing.Any]]):
    return quart.abort(quart.Response(json.dumps(data), status_code, content_type = "application/json"))

def is_safe_segment(segment: str) -> bool:
    """True when ``segment`` can be joined onto a root as a single path component."""
    if not segment or segment in (".", ".."):
        return False
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in segment for sep in separators) and "\x00" not in segment
