"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from datetime import datetime


class AddRequest(BaseModel):
    """Request to shorten a URL."""
    
    url: str = Field(..., description="The URL to shorten", min_length=1)
    
    model_config = {
        "strict": True,
        "json_schema_extra": {
            "examples": [
                {"url": "http://example.com"},
            ]
        },
    }


class AddResponse(BaseModel):
    """Response after shortening a URL."""
    
    shortened_url: str = Field(..., description="Domain followed by the short code")
    long_url: str = Field(..., description="The original long URL")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shortened_url": "http://localhost:8080/89dce6a446",
                    "long_url": "http://example.com",
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    backend: str = Field(..., description="Store backend in use")
    timestamp: datetime = Field(..., description="Check timestamp")
