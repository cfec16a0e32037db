"""Image API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from gallery.domain.entities import ImageRef


class ImageRefResponse(BaseModel):
    """One image: Drive id, proxy URL and mime type."""

    id: str
    url: str = Field(..., description="Proxy path, e.g. /api/image/{id}")
    type: str = Field(..., description="Mime type")

    @classmethod
    def from_entity(cls, image: ImageRef) -> "ImageRefResponse":
        return cls(id=image.id, url=image.url, type=image.type)


class ImagesResponse(BaseModel):
    """Response for GET /api/images."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    level: str
    roll_number: str | None = Field(default=None, alias="rollNumber")
    images: list[ImageRefResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses."""

    success: bool = False
    message: str
