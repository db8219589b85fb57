from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, ModelDescriptor, PerSecondCost


_RATIOS = p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE))
_TEXT_OPTIONS = {
    'duration': p.duration(p.FIVE_OR_TEN, '5'),
    'aspectRatio': _RATIOS,
    'negativePrompt': p.NEGATIVE_PROMPT,
}
_PRECISION = 'Top-tier video generation with motion fluidity, cinematic visuals, and exceptional prompt precision.'
_SHARP = 'Prompt-faithful videos in sharp 1080p, capturing complex camera moves with convincing realism.'


def _text_model(id: str, name: str, endpoint: str, rate: str, description: str, features=()) -> ModelDescriptor:
    return ModelDescriptor(
        id=id,
        display_name=name,
        endpoint=endpoint,
        media='video',
        tabs=p.VIDEO_TABS_TEXT,
        provider='Kling',
        description=description,
        features=tuple(features),
        categories=('recommended', 'kling'),
        cost=PerSecondCost(rate),
        fields=('prompt', 'duration', 'aspectRatio', 'negativePrompt'),
        field_options=_TEXT_OPTIONS,
    )


KLING_V2_5_TURBO_PRO = _text_model(
    'KLING_V2_5_TURBO_PRO',
    'Kling 2.5 Turbo',
    'fal-ai/kling-video/v2.5-turbo/pro/text-to-video',
    '0.07',
    _PRECISION,
    ('1080p',),
)
KLING_V2_1_MASTER = _text_model(
    'KLING_V2.1_MASTER',
    'Kling v2.1 Master',
    'fal-ai/kling-video/v2.1/master/text-to-video',
    '0.28',
    'Advanced Kling 2.1 model for text-to-video generation.',
)
KLING_V1_6 = _text_model(
    'KLING_V1_6',
    'Kling v1.6 Pro',
    'fal-ai/kling-video/v1.6/pro/text-to-video',
    '0.095',
    _SHARP,
    ('1080p',),
)
KLING_MASTER = _text_model(
    'KLING_MASTER',
    'Kling 2.0 Master',
    'fal-ai/kling-video/v2/master/text-to-video',
    '0.3',
    'Advanced Kling 2.0 model for text-to-video generation.',
)

KLING_V2_5_TURBO_PRO_IMAGE = ModelDescriptor(
    id='KLING_V2_5_TURBO_PRO_IMAGE',
    display_name='Kling 2.5 Turbo (Image)',
    endpoint='fal-ai/kling-video/v2.5-turbo/pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Kling',
    description=_PRECISION,
    features=('1080p',),
    categories=('recommended', 'kling'),
    cost=PerSecondCost('0.07'),
    fields=('prompt', 'imageBase64', 'duration', 'negativePrompt'),
    field_options={
        'duration': p.duration(p.FIVE_OR_TEN, '5'),
        'negativePrompt': p.NEGATIVE_PROMPT,
    },
)

KLING_V2_1_PRO_IMAGE = ModelDescriptor(
    id='KLING_V2.1_PRO_IMAGE',
    display_name='Kling v2.1 Pro (Image)',
    endpoint='fal-ai/kling-video/v2.1/pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Kling',
    description='Advanced Kling 2.1 Pro model for Image-to-video generation.',
    features=('1080p', 'End Frame'),
    categories=('recommended', 'kling'),
    cost=PerSecondCost('0.09'),
    fields=('prompt', 'imageBase64', 'tail_image_url', 'duration', 'aspectRatio', 'negativePrompt'),
    field_options=_TEXT_OPTIONS,
    capabilities=Capabilities(supports_tail_image=True),
)

KLING_IMAGE_V1_6 = ModelDescriptor(
    id='KLING_IMAGE_V1_6',
    display_name='Kling v1.6 Pro (Image)',
    endpoint='fal-ai/kling-video/v1.6/pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Kling',
    description=_SHARP,
    features=('End Frame', '1080p'),
    categories=('recommended', 'kling'),
    cost=PerSecondCost('0.095'),
    fields=('prompt', 'imageBase64', 'tail_image_url', 'duration', 'aspectRatio', 'negativePrompt'),
    field_options=_TEXT_OPTIONS,
    capabilities=Capabilities(supports_tail_image=True),
)

KLING_IMAGE_MASTER = ModelDescriptor(
    id='KLING_IMAGE_MASTER',
    display_name='Kling 2.0 Master (Image)',
    endpoint='fal-ai/kling-video/v2/master/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Kling',
    description='Advanced Kling 2.0 model for image-to-video generation.',
    categories=('kling',),
    cost=PerSecondCost('0.3'),
    fields=('prompt', 'imageBase64', 'aspectRatio', 'negativePrompt'),
    field_options={'aspectRatio': _RATIOS, 'negativePrompt': p.NEGATIVE_PROMPT},
    capabilities=Capabilities(fixed_duration=5),
)

MODELS = (
    KLING_V2_5_TURBO_PRO,
    KLING_V2_1_MASTER,
    KLING_V1_6,
    KLING_MASTER,
    KLING_V2_5_TURBO_PRO_IMAGE,
    KLING_V2_1_PRO_IMAGE,
    KLING_IMAGE_V1_6,
    KLING_IMAGE_MASTER,
)
