from pydantic import BaseModel, Field, field_validator

from shortly.utils.encoding import DEFAULT_ALPHABET, validate_alphabet

class ShortenerConfig(BaseModel):
    alphabet: str = DEFAULT_ALPHABET
    # prepended verbatim to every short code, e.g. "http://short.ly/"
    protocol: str
    start_id: int = Field(0, ge=0)

    @field_validator('alphabet')
    def check_alphabet(cls, v):
        # InvalidArgument is a ValueError, so pydantic reports it as a validation error
        return validate_alphabet(v)

    model_config = {"frozen": True}
