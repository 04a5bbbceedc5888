import typing
import quart

from . import images

blueprints: typing.Tuple[quart.Blueprint, ...] = (
    images.images,
)
