from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # fal.ai
    fal_api_key: str = Field('', alias='FAL_API_KEY')
    fal_base_url: str = Field('https://fal.run', alias='FAL_BASE_URL')

    # Cloudinary
    cloudinary_cloud_name: str = Field('', alias='CLOUDINARY_CLOUD_NAME')
    cloudinary_upload_preset: str = Field('', alias='CLOUDINARY_UPLOAD_PRESET')
    cloudinary_folder: str = Field('generator-temp', alias='CLOUDINARY_FOLDER')

    # Upload ceilings
    max_image_upload_bytes: int = Field(10 * 1024 * 1024, alias='MAX_IMAGE_UPLOAD_BYTES')
    max_video_upload_bytes: int = Field(100 * 1024 * 1024, alias='MAX_VIDEO_UPLOAD_BYTES')

    # HTTP
    http_timeout_seconds: float = Field(60, alias='HTTP_TIMEOUT_SECONDS')

    # Session
    recent_models_limit: int = Field(10, alias='RECENT_MODELS_LIMIT')
    draft_namespace: str = Field('generation-draft', alias='DRAFT_NAMESPACE')

    # Logging
    log_level: str = Field('INFO', alias='LOG_LEVEL')
    log_format: str = Field('json', alias='LOG_FORMAT')

    def upload_limit_for(self, content_type: str | None) -> int:
        if (content_type or '').lower().startswith('video/'):
            return self.max_video_upload_bytes
        return self.max_image_upload_bytes

    def cloudinary_upload_url(self, resource_type: str) -> str:
        return f'https://api.cloudinary.com/v1_1/{self.cloudinary_cloud_name}/{resource_type}/upload'


@lru_cache
def get_settings() -> Settings:
    return Settings()
