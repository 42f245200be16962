from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaylistCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Road trip"])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class PlaylistSongPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    song_id: str = Field(..., alias="songId", min_length=1, examples=["song-Qbax5Oy7L8WKf74l"])


class SongSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    performer: str


class PlaylistSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    username: str | None = None


class PlaylistDetail(PlaylistSummary):
    songs: list[SongSummary]
