import dataclasses
import typing

import quart

from .. import cdn
from .. import utils

images = quart.Blueprint(
    "images",
    __name__,
    url_prefix = "/Images",
)


def _checked(**segments: str) -> typing.Dict[str, str]:
    for key, value in segments.items():
        if not utils.is_safe_segment(value):
            utils.abort_json(404, {"message": f"Invalid {key}: {value!r}"})
    return segments


@dataclasses.dataclass(frozen = True)
class GeneralImageRequest:
    name: str
    type: str

    @classmethod
    def from_path(cls, name: str, type: str) -> "GeneralImageRequest":
        return cls(**_checked(name = name, type = type))


@dataclasses.dataclass(frozen = True)
class RatingImageRequest:
    name: str
    theme: str

    @classmethod
    def from_path(cls, theme: str, name: str) -> "RatingImageRequest":
        return cls(**_checked(theme = theme, name = name))


@dataclasses.dataclass(frozen = True)
class MediaInfoImageRequest:
    name: str
    theme: str

    @classmethod
    def from_path(cls, theme: str, name: str) -> "MediaInfoImageRequest":
        return cls(**_checked(theme = theme, name = name))


@images.route("/General/<name>/<image_type>", methods = ("GET",))
async def general_image(name: str, image_type: str):
    """Gets a general image by name"""
    req = GeneralImageRequest.from_path(name, image_type)
    resolver = quart.current_app.image_resolver
    path = await utils.run_async(resolver.resolve_general, req.name, req.type)
    return await cdn.send_image(path)


@images.route("/Ratings/<theme>/<name>", methods = ("GET",))
async def rating_image(theme: str, name: str):
    """Gets a rating image by name"""
    req = RatingImageRequest.from_path(theme, name)
    resolver = quart.current_app.image_resolver
    path = await utils.run_async(resolver.resolve_rating, req.theme, req.name)
    return await cdn.send_image(path)


@images.route("/MediaInfo/<theme>/<name>", methods = ("GET",))
async def media_info_image(theme: str, name: str):
    """Gets a media info image by name"""
    req = MediaInfoImageRequest.from_path(theme, name)
    resolver = quart.current_app.image_resolver
    path = await utils.run_async(resolver.resolve_media_info, req.theme, req.name)
    return await cdn.send_image(path)


images.endpoints = (general_image, rating_image, media_info_image)
