from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import (
    Capabilities,
    CostTier,
    FileConfig,
    ModelDescriptor,
    PerSecondCost,
    TieredCost,
    ToggleConfig,
)


_WIDE_RATIOS = (p.ULTRAWIDE, p.LANDSCAPE, p.STANDARD_4_3, p.SQUARE, p.PORTRAIT_3_4, p.PORTRAIT)
_CAMERA_FIXED = ToggleConfig(default=False, label='Fix camera position', help_text='Lock camera to prevent movement')
_PRO_FAST_TIERS = (CostTier('480p', '0.006'), CostTier('720p', '0.013'), CostTier('1080p', '0.026'))


SEEDANCE_TEXT = ModelDescriptor(
    id='SEEDANCE_TEXT',
    display_name='Seedance 1.0 Pro',
    endpoint='fal-ai/bytedance/seedance/v1/pro/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='ByteDance',
    description='High-quality text-to-video generation with ByteDance Seedance Pro model.',
    features=('1080p', 'Fast'),
    categories=('bytedance', 'recommended'),
    cost=PerSecondCost('0.125'),
    fields=('prompt', 'duration', 'aspectRatio', 'cameraFixed', 'seed'),
    field_options={
        'duration': p.duration(p.SEEDANCE_DURATIONS, '12'),
        'aspectRatio': p.aspect_ratio(_WIDE_RATIOS, default='21:9'),
        'cameraFixed': _CAMERA_FIXED,
        'seed': p.HIDDEN_SEED,
    },
)

SEEDANCE_V1_LITE = ModelDescriptor(
    id='SEEDANCE_V1_LITE',
    display_name='Seedance 1.0 Lite',
    endpoint='fal-ai/bytedance/seedance/v1/lite/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='ByteDance',
    description='High-quality text-to-video generation by ByteDance with flexible duration control.',
    features=('Fast', '1080p'),
    categories=('bytedance',),
    cost=PerSecondCost('0.036'),
    fields=('prompt', 'duration', 'aspectRatio', 'cameraFixed'),
    field_options={
        'duration': p.duration(p.SEEDANCE_DURATIONS, '5'),
        'aspectRatio': p.aspect_ratio(_WIDE_RATIOS + (p.VERTICAL,)),
        'cameraFixed': _CAMERA_FIXED,
    },
)

BYTEDANCE_SEEDANCE_PRO_FAST_TEXT = ModelDescriptor(
    id='BYTEDANCE_SEEDANCE_PRO_FAST_TEXT',
    display_name='Seedance 1.0 Pro Fast',
    endpoint='fal-ai/bytedance/seedance/v1/pro/fast/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='ByteDance',
    description='Next-generation video model designed to deliver maximum performance at minimal cost.',
    features=('Fast', '1080p'),
    categories=('recommended', 'bytedance'),
    cost=TieredCost('0.026', _PRO_FAST_TIERS),
    fields=('prompt', 'duration', 'aspectRatio', 'resolution', 'cameraFixed', 'seed'),
    field_options={
        'duration': p.duration(p.SEEDANCE_DURATIONS, '5'),
        'aspectRatio': p.aspect_ratio(_WIDE_RATIOS, default='21:9'),
        'resolution': p.resolution((p.RES_480, p.RES_720, p.RES_1080), default='1080p'),
        'cameraFixed': _CAMERA_FIXED,
        'seed': p.HIDDEN_SEED,
    },
)

SEEDANCE_IMAGE = ModelDescriptor(
    id='SEEDANCE_IMAGE',
    display_name='Seedance 1.0 Pro (Image)',
    endpoint='fal-ai/bytedance/seedance/v1/pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='ByteDance',
    description='High-quality image-to-video generation with ByteDance Seedance Pro model.',
    features=('1080p', 'End Frame'),
    categories=('bytedance', 'recommended'),
    cost=PerSecondCost('0.125'),
    fields=('prompt', 'imageBase64', 'endFrameImageBase64', 'duration', 'cameraFixed', 'seed'),
    field_options={
        'duration': p.duration(p.SEEDANCE_DURATIONS, '5'),
        'cameraFixed': _CAMERA_FIXED,
        'seed': p.HIDDEN_SEED,
    },
    capabilities=Capabilities(supports_end_frame=True),
)

BYTEDANCE_SEEDANCE_LITE_REFERENCE = ModelDescriptor(
    id='BYTEDANCE_SEEDANCE_LITE_REFERENCE',
    display_name='Seedance 1.0 Lite Reference',
    endpoint='fal-ai/bytedance/seedance/v1/lite/reference-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='ByteDance',
    description='Generate video guided by up to four reference images.',
    features=('Multi-Image Reference',),
    categories=('bytedance',),
    cost=PerSecondCost('0.036'),
    fields=('prompt', 'referenceImageUrls', 'duration', 'aspectRatio', 'cameraFixed'),
    field_options={
        'duration': p.duration(p.SEEDANCE_DURATIONS, '5'),
        'aspectRatio': p.aspect_ratio(_WIDE_RATIOS),
        'cameraFixed': _CAMERA_FIXED,
        'referenceImageUrls': FileConfig(
            multiple=True,
            label='Reference Images',
            min_files=1,
            max_files=4,
            required=True,
        ),
    },
)

MODELS = (
    SEEDANCE_TEXT,
    SEEDANCE_V1_LITE,
    BYTEDANCE_SEEDANCE_PRO_FAST_TEXT,
    SEEDANCE_IMAGE,
    BYTEDANCE_SEEDANCE_LITE_REFERENCE,
)
