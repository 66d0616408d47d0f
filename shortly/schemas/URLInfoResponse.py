from pydantic import BaseModel

class URLInfoResponse(BaseModel):
    id: int
    short_code: str
    short_url: str
    # not an HttpUrl: registry values are stored exactly as given
    original_url: str
