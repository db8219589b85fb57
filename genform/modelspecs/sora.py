from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, CostTier, ModelDescriptor, PerSecondCost, TieredCost


_SORA_DESCRIPTION = (
    "OpenAI's SOTA video model capable of creating richly detailed, dynamic clips with audio "
    'from natural language. Tuned for speed and everyday creation.'
)
_SORA_PRO_TIERS = (CostTier('720p', '0.3'), CostTier('1080p', '0.5'))
_DURATIONS = p.duration(('4', '8', '12'), '8')
_RATIOS = p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT))
_AUDIO = Capabilities(supports_audio_generation=True)


SORA_2_TEXT = ModelDescriptor(
    id='SORA_2_TEXT',
    display_name='Sora 2',
    endpoint='fal-ai/sora-2/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='OpenAI',
    description=_SORA_DESCRIPTION,
    features=('Audio Generation', '720p'),
    categories=('recommended', 'sora', 'openai'),
    cost=PerSecondCost('0.1'),
    fields=('prompt', 'duration', 'aspectRatio', 'resolution'),
    field_options={
        'duration': _DURATIONS,
        'aspectRatio': _RATIOS,
        'resolution': p.resolution((p.RES_720,), user_selectable=False),
    },
    capabilities=_AUDIO,
)

SORA_2_PRO_TEXT = ModelDescriptor(
    id='SORA_2_PRO_TEXT',
    display_name='Sora 2 Pro',
    endpoint='fal-ai/sora-2/text-to-video/pro',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='OpenAI',
    description=(
        'Higher fidelity version of Sora 2 for complex scenes and tougher shots. '
        'Takes longer to generate but delivers enhanced detail and quality.'
    ),
    features=('Audio Generation', '1080p'),
    categories=('recommended', 'sora', 'openai'),
    cost=TieredCost('0.3', _SORA_PRO_TIERS),
    fields=('prompt', 'duration', 'aspectRatio', 'resolution'),
    field_options={
        'duration': _DURATIONS,
        'aspectRatio': _RATIOS,
        'resolution': p.resolution((p.RES_720, p.RES_1080)),
    },
    capabilities=_AUDIO,
)

SORA_2_PRO_IMAGE = ModelDescriptor(
    id='SORA_2_PRO_IMAGE',
    display_name='Sora 2 Pro',
    endpoint='fal-ai/sora-2/image-to-video/pro',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='OpenAI',
    description=(
        'Higher fidelity version of Sora 2. Takes longer to generate but delivers enhanced '
        'detail and quality for complex scenes.'
    ),
    features=('Audio Generation', '1080p'),
    categories=('recommended', 'sora', 'openai'),
    cost=TieredCost('0.3', _SORA_PRO_TIERS),
    fields=('prompt', 'imageBase64', 'duration', 'aspectRatio', 'resolution'),
    field_options={
        'duration': _DURATIONS,
        'aspectRatio': _RATIOS,
        'resolution': p.resolution((p.RES_720, p.RES_1080)),
    },
    capabilities=_AUDIO,
)

SORA_2_IMAGE = ModelDescriptor(
    id='SORA_2_IMAGE',
    display_name='Sora 2',
    endpoint='fal-ai/sora-2/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='OpenAI',
    description=_SORA_DESCRIPTION,
    features=('Audio Generation', '720p'),
    categories=('recommended', 'sora', 'openai'),
    cost=TieredCost('0.1', (CostTier('720p', '0.1'),)),
    fields=('prompt', 'imageBase64', 'duration', 'aspectRatio', 'resolution'),
    field_options={
        'duration': _DURATIONS,
        'aspectRatio': _RATIOS,
        'resolution': p.resolution((p.RES_720,), user_selectable=False),
    },
    capabilities=_AUDIO,
)

MODELS = (SORA_2_TEXT, SORA_2_PRO_TEXT, SORA_2_PRO_IMAGE, SORA_2_IMAGE)
