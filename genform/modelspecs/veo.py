from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, ModelDescriptor, PerSecondCost, TieredCost


_VEO31_FIELDS = ('prompt', 'aspectRatio', 'duration', 'negativePrompt', 'enhancePrompt', 'seed', 'resolution')
_VEO31_OPTIONS = {
    'duration': p.duration(('4', '6', '8'), '8'),
    'aspectRatio': p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE)),
    'resolution': p.resolution((p.RES_720, p.RES_1080)),
    'negativePrompt': p.NEGATIVE_PROMPT,
    'enhancePrompt': p.ENHANCE_PROMPT,
    'seed': p.HIDDEN_SEED,
}
_LONG_PROMPTS = dict(prompt_character_limit=10000, negative_prompt_character_limit=10000)


VEO3_1 = ModelDescriptor(
    id='VEO3_1',
    display_name='Veo 3.1',
    endpoint='fal-ai/veo3.1',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Veo',
    description='The most advanced AI video generation model by Google. With sound on!',
    features=('Audio Generation', '1080p'),
    categories=('recommended', 'veo'),
    cost=PerSecondCost('0.4'),
    fields=_VEO31_FIELDS,
    field_options=_VEO31_OPTIONS,
    capabilities=Capabilities(supports_audio_generation=True, **_LONG_PROMPTS),
)

VEO3_1_FAST = ModelDescriptor(
    id='VEO3_1_FAST',
    display_name='Veo 3.1 Fast',
    endpoint='fal-ai/veo3.1/fast',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Veo',
    description="Faster and more cost effective version of Google's Veo 3.1!",
    features=('Fast', 'Audio Generation', '1080p'),
    categories=('veo', 'recommended'),
    cost=PerSecondCost('0.15'),
    fields=_VEO31_FIELDS,
    field_options=_VEO31_OPTIONS,
    capabilities=Capabilities(supports_audio_generation=True, **_LONG_PROMPTS),
)

VEO3 = ModelDescriptor(
    id='VEO3',
    display_name='Veo 3',
    endpoint='fal-ai/veo3',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Veo',
    description='High-resolution, detailed videos with cinematic realism',
    features=('Audio Generation',),
    categories=('recommended', 'veo'),
    cost=PerSecondCost('0.4'),
    fields=('prompt', 'aspectRatio'),
    field_options={'aspectRatio': p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE))},
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=8, **_LONG_PROMPTS),
)

VEO3_FAST = ModelDescriptor(
    id='VEO3_FAST',
    display_name='Veo 3 Fast',
    endpoint='fal-ai/veo3/fast',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Veo',
    description="Fast and cost effective version of Google's Veo 3",
    features=('Fast', 'Audio Generation'),
    categories=('veo', 'recommended'),
    cost=PerSecondCost('0.15'),
    fields=('prompt', 'aspectRatio', 'negativePrompt', 'enhancePrompt', 'seed'),
    field_options={
        'aspectRatio': p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE)),
        'negativePrompt': p.NEGATIVE_PROMPT,
        'enhancePrompt': p.ENHANCE_PROMPT,
        'seed': p.HIDDEN_SEED,
    },
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=8, **_LONG_PROMPTS),
)

# Flat per-second rate with no resolution tiers.
VEO2 = ModelDescriptor(
    id='VEO2',
    display_name='Veo 2',
    endpoint='fal-ai/veo2',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Veo',
    description='High-resolution (up to 4K), detailed videos with cinematic realism',
    categories=('veo',),
    cost=TieredCost('2.5'),
    fields=('prompt', 'duration', 'aspectRatio'),
    field_options={
        'duration': p.duration(('5', '6', '7', '8'), '5'),
        'aspectRatio': p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT)),
    },
)

VEO3_1_IMAGE = ModelDescriptor(
    id='VEO3_1_IMAGE',
    display_name='Veo 3.1 (Image)',
    endpoint='fal-ai/veo3.1/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Veo',
    description='The most advanced AI video generation model by Google. With sound on!',
    features=('Audio Generation', '1080p', 'End Frame'),
    categories=('recommended', 'veo'),
    cost=PerSecondCost('0.4'),
    fields=('prompt', 'imageBase64', 'aspectRatio', 'duration', 'resolution', 'endFrameImageBase64'),
    field_options={
        'duration': p.duration(('8',), '8', user_selectable=False),
        'aspectRatio': p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT)),
        'resolution': p.resolution((p.RES_720, p.RES_1080)),
    },
    capabilities=Capabilities(
        supports_end_frame=True,
        supports_audio_generation=True,
        fixed_duration=8,
        **_LONG_PROMPTS,
    ),
)

VEO3_1_REFERENCE = ModelDescriptor(
    id='VEO3_1_REFERENCE',
    display_name='Veo 3.1 (Ingredients)',
    endpoint='fal-ai/veo3.1/reference-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Veo',
    description=(
        "Generate videos from multiple reference images (ingredients) using Google's Veo 3.1 "
        'for consistent subject appearance.'
    ),
    features=('Multi-Image Reference', 'Audio Generation', '1080p'),
    categories=('recommended', 'veo'),
    cost=PerSecondCost('0.4'),
    fields=('prompt', 'referenceImageUrls', 'duration', 'resolution'),
    field_options={
        'duration': p.duration(('8',), '8', user_selectable=False),
        'resolution': p.resolution((p.RES_720, p.RES_1080)),
    },
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=8, **_LONG_PROMPTS),
)

VEO3_IMAGE = ModelDescriptor(
    id='VEO3_IMAGE',
    display_name='Veo 3 (Image)',
    endpoint='fal-ai/veo3/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Veo',
    description='High-quality video generation model from Google. With sound on!',
    features=('Audio Generation', '1080p'),
    categories=('recommended', 'veo'),
    cost=PerSecondCost('0.4'),
    fields=('prompt', 'imageBase64', 'aspectRatio'),
    field_options={'aspectRatio': p.aspect_ratio((p.AUTO_RATIO, p.LANDSCAPE, p.PORTRAIT), default='auto')},
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=8, **_LONG_PROMPTS),
)

MODELS = (VEO3_1, VEO3_1_FAST, VEO3, VEO3_FAST, VEO2, VEO3_1_IMAGE, VEO3_1_REFERENCE, VEO3_IMAGE)
