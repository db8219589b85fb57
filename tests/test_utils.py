from decimal import Decimal

import structlog

from genform.config import Settings
from genform.utils.credits import credits_to_display, format_cost, format_credits, to_credits
from genform.utils.files import FileHandle, format_file_size, is_file_list, iter_files
from genform.utils.logging import configure_from_settings, configure_logging, get_logger
from genform.utils.text import clamp_text, humanize_field_name, is_blank


class TestCredits:
    def test_to_credits(self):
        assert to_credits('0.12345') == Decimal('0.1235')
        assert to_credits('1,5') == Decimal('1.5000')
        assert to_credits('junk') == Decimal('0')
        assert to_credits(None, default='2') == Decimal('2')

    def test_display(self):
        assert credits_to_display(Decimal('0.4000')) == '0.4'
        assert credits_to_display(3) == '3'

    def test_format_cost(self):
        assert format_cost('0.4') == '0.40'
        assert format_cost(1234) == '1.2K'
        assert format_credits('0.4') == '0.40M credits'


class TestText:
    def test_humanize(self):
        assert humanize_field_name('aspectRatio') == 'Aspect Ratio'
        assert humanize_field_name('num_images') == 'Num Images'

    def test_clamp(self):
        assert clamp_text('short', 10) == 'short'
        assert clamp_text('a' * 20, 10) == 'a' * 9 + '...'

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank('  ')
        assert is_blank([])
        assert not is_blank(0)
        assert not is_blank(False)
        assert not is_blank(['x'])


class TestFiles:
    def test_handles(self, png, clip):
        assert png.is_image and not png.is_video
        assert clip.is_video
        assert FileHandle('blob', 'image/png').extension == 'png'
        assert iter_files([png, 'https://x', clip]) == [png, clip]
        assert iter_files('https://x') == []
        assert is_file_list([png])
        assert not is_file_list([])

    def test_format_file_size(self):
        assert format_file_size(512) == '512 B'
        assert format_file_size(2048) == '2.0 KB'
        assert format_file_size(3 * 1024 * 1024) == '3.0 MB'


class TestSettings:
    def test_upload_limits(self):
        settings = Settings(MAX_IMAGE_UPLOAD_BYTES=100, MAX_VIDEO_UPLOAD_BYTES=1000)
        assert settings.upload_limit_for('image/jpeg') == 100
        assert settings.upload_limit_for('VIDEO/mp4') == 1000
        assert settings.upload_limit_for(None) == 100

    def test_cloudinary_url(self):
        settings = Settings(CLOUDINARY_CLOUD_NAME='demo')
        assert settings.cloudinary_upload_url('video') == 'https://api.cloudinary.com/v1_1/demo/video/upload'


class TestLogging:
    """configure_logging swaps the structlog pipeline; reset after each case."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_console_format(self):
        configure_logging('debug', 'console')
        processors = structlog.get_config()['processors']
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        get_logger('tests').debug('console_ok', value=1)

    def test_json_format_by_default(self):
        configure_logging('nonsense')
        processors = structlog.get_config()['processors']
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_from_settings(self):
        configure_from_settings()
        assert structlog.is_configured()
