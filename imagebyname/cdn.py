import logging
import os
import typing

import quart

from . import utils

log = logging.getLogger(__name__)


async def send_image(path: typing.Union[str, os.PathLike]) -> quart.Response:
    try:
        return await quart.send_file(path)
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        log.info("Requested image %s is not on disk", path)
        utils.abort_json(404, {"message": "Requested file was not found on the server!"})
