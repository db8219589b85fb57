import json

import httpx
import pytest

from genform.config import Settings
from genform.services.cloudinary import CloudinaryUploader, UploadError
from genform.services.fal_client import FalClient, InferenceError
from genform.utils.files import FileHandle


def _settings(**overrides) -> Settings:
    values = {
        'FAL_API_KEY': 'secret',
        'FAL_BASE_URL': 'https://fal.test',
        'CLOUDINARY_CLOUD_NAME': 'demo',
        'CLOUDINARY_UPLOAD_PRESET': 'unsigned',
    }
    values.update(overrides)
    return Settings(**values)


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestCloudinaryUploader:
    @pytest.mark.asyncio
    async def test_upload(self, png):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={'secure_url': 'https://res.test/cat.png', 'format': 'png', 'width': 64, 'height': 32, 'public_id': 'cat'},
            )

        uploader = CloudinaryUploader(_settings(), client=_client(handler))
        result = await uploader.upload(png)
        assert result.url == 'https://res.test/cat.png'
        assert (result.width, result.height, result.public_id) == (64, 32, 'cat')
        assert str(requests[0].url) == 'https://api.cloudinary.com/v1_1/demo/image/upload'
        body = requests[0].content
        assert b'unsigned' in body
        assert b'generator-temp' in body

    @pytest.mark.asyncio
    async def test_video_resource_type(self, clip):
        urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(str(request.url))
            return httpx.Response(200, json={'url': 'http://res.test/clip.mp4'})

        uploader = CloudinaryUploader(_settings(), client=_client(handler))
        result = await uploader.upload(clip)
        assert urls == ['https://api.cloudinary.com/v1_1/demo/video/upload']
        assert result.format == 'mp4'

    @pytest.mark.asyncio
    async def test_rejects_before_network(self, large_png):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError('should not be called')

        uploader = CloudinaryUploader(_settings(), client=_client(handler))
        with pytest.raises(UploadError, match='File must be 10MB or less'):
            await uploader.upload(large_png)
        with pytest.raises(UploadError, match='Invalid file type. Expected image or video, got: application/pdf'):
            await uploader.upload(FileHandle('doc.pdf', 'application/pdf', b'%PDF'))

    @pytest.mark.asyncio
    async def test_http_error(self, png):
        uploader = CloudinaryUploader(_settings(), client=_client(lambda request: httpx.Response(401, text='bad preset')))
        with pytest.raises(UploadError) as excinfo:
            await uploader.upload(png)
        assert excinfo.value.status_code == 401
        assert excinfo.value.filename == 'cat.png'

    @pytest.mark.asyncio
    async def test_missing_url(self, png):
        uploader = CloudinaryUploader(_settings(), client=_client(lambda request: httpx.Response(200, json={})))
        with pytest.raises(UploadError, match='did not include a URL'):
            await uploader.upload(png)


class TestFalClient:
    @pytest.mark.asyncio
    async def test_generate(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={'images': [{'url': 'https://out.test/1.png'}, {'url': 'https://out.test/2.png'}]},
                headers={'x-fal-request-id': 'req-1'},
            )

        client = FalClient(_settings(), client=_client(handler))
        result = await client.generate('fal-ai/flux/dev', {'prompt': 'a kite', 'num_images': 2})
        assert result.success
        assert result.result_urls == ['https://out.test/1.png', 'https://out.test/2.png']
        assert result.request_id == 'req-1'
        assert str(requests[0].url) == 'https://fal.test/fal-ai/flux/dev'
        assert requests[0].headers['Authorization'] == 'Key secret'
        assert json.loads(requests[0].content) == {'prompt': 'a kite', 'num_images': 2}

    @pytest.mark.asyncio
    async def test_http_error(self):
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(422, text='bad input')))
        with pytest.raises(InferenceError) as excinfo:
            await client.generate('fal-ai/flux/dev', {})
        assert excinfo.value.status_code == 422

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('refused', request=request)

        client = FalClient(_settings(), client=_client(handler))
        with pytest.raises(InferenceError, match='fal request failed'):
            await client.generate('fal-ai/flux/dev', {})

    @pytest.mark.asyncio
    async def test_empty_result(self):
        payload = {'detail': [{'msg': 'prompt flagged'}]}
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(200, json=payload)))
        result = await client.generate('fal-ai/flux/dev', {})
        assert not result.success
        assert result.error == 'prompt flagged'

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(200, text='<html>bad gateway</html>')))
        with pytest.raises(InferenceError, match='non-JSON') as excinfo:
            await client.generate('fal-ai/flux/dev', {})
        assert excinfo.value.status_code == 200

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(200, json=['https://out.test/a.png'])))
        with pytest.raises(InferenceError, match='unexpected response: list'):
            await client.generate('fal-ai/flux/dev', {})


class TestResultParsing:
    def test_variants_deduplicated(self):
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(200)))
        record = {
            'video': {'url': 'https://out.test/v.mp4'},
            'videos': [{'url': 'https://out.test/v.mp4'}, ' https://out.test/w.mp4 '],
            'output': {'image': {'url': 'https://out.test/i.png'}},
        }
        assert client.parse_result_urls(record) == [
            'https://out.test/v.mp4',
            'https://out.test/w.mp4',
            'https://out.test/i.png',
        ]

    def test_output_list(self):
        client = FalClient(_settings(), client=_client(lambda request: httpx.Response(200)))
        assert client.parse_result_urls({'output': ['https://out.test/a.png']}) == ['https://out.test/a.png']
