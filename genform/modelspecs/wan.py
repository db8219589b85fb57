from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FixedCost, ModelDescriptor, PerSecondCost, SliderConfig


_RATIOS = p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE))
_SHIFT = SliderConfig(
    default='5',
    label='Shift',
    min=0,
    max=10,
    step=1,
    help_text='Control the transformation intensity',
)
_ANIMATE_OPTIONS = {'resolution': p.resolution((p.RES_720, p.RES_1080)), 'shift': _SHIFT}


# Output length follows the input video, so neither animate model takes a duration.
WAN_ANIMATE_REPLACE = ModelDescriptor(
    id='WAN_ANIMATE_REPLACE',
    display_name='Wan-2.2 Replace',
    endpoint='fal-ai/wan/v2.2-14b/animate/replace',
    media='video',
    tabs=p.VIDEO_TABS_VIDEO,
    provider='Wan',
    description='Character swap in video',
    features=('Character Replace', 'Scene Preservation'),
    categories=('recommended', 'wan'),
    cost=PerSecondCost('0.08'),
    fields=('videoBase64', 'imageBase64', 'resolution', 'shift'),
    field_options=_ANIMATE_OPTIONS,
)

WAN_ANIMATE_MOVE = ModelDescriptor(
    id='WAN_ANIMATE_MOVE',
    display_name='Wan-2.2 Animate',
    endpoint='fal-ai/wan/v2.2-14b/animate/move',
    media='video',
    tabs=p.VIDEO_TABS_VIDEO,
    provider='Wan',
    description='Motion replication in video',
    features=('Motion Transfer', 'Expression Replication'),
    categories=('wan',),
    cost=PerSecondCost('0.08'),
    fields=('videoBase64', 'imageBase64', 'resolution', 'shift'),
    field_options=_ANIMATE_OPTIONS,
)

WAN_PRO = ModelDescriptor(
    id='WAN_PRO',
    display_name='Wan Pro',
    endpoint='fal-ai/wan-pro/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Wan',
    description='Open-source 1080p model topping VBench, delivering exceptional visual quality and motion diversity.',
    categories=('wan',),
    cost=FixedCost('0.8'),
    fields=('prompt',),
)

WAN_2_2_TURBO = ModelDescriptor(
    id='WAN_2_2_TURBO',
    display_name='Wan-2.2 Turbo',
    endpoint='fal-ai/wan/v2.2-a14b/text-to-video/turbo',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Wan',
    description='High-quality videos with high visual quality and motion diversity from text prompts.',
    features=('Fast', '720p'),
    categories=('wan',),
    cost=PerSecondCost('0.02'),
    fields=('prompt', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS},
    capabilities=Capabilities(fixed_duration=5),
)

WAN_2_5_TEXT = ModelDescriptor(
    id='WAN_2_5_TEXT',
    display_name='Wan 2.5',
    endpoint='fal-ai/wan-25-preview/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Wan',
    description='Latest frontier model from Alibaba with sound.',
    features=('Audio Generation', '1080p', 'Prompt Optimizer'),
    categories=('recommended', 'wan'),
    cost=FixedCost('0.7'),
    fields=('prompt', 'aspectRatio', 'negativePrompt', 'enhancePrompt', 'seed'),
    field_options={
        'aspectRatio': _RATIOS,
        'negativePrompt': p.NEGATIVE_PROMPT,
        'enhancePrompt': p.ENHANCE_PROMPT,
        'seed': p.HIDDEN_SEED,
    },
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=5),
)

WAN_2_5_IMAGE = ModelDescriptor(
    id='WAN_2_5_IMAGE',
    display_name='Wan 2.5 (Image)',
    endpoint='fal-ai/wan-25-preview/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Wan',
    description='Latest frontier model from Alibaba with sound, animating a still image.',
    features=('Audio Generation', '1080p', 'Prompt Optimizer'),
    categories=('recommended', 'wan'),
    cost=FixedCost('0.7'),
    fields=('prompt', 'imageBase64', 'negativePrompt', 'enhancePrompt', 'seed'),
    field_options={
        'negativePrompt': p.NEGATIVE_PROMPT,
        'enhancePrompt': p.ENHANCE_PROMPT,
        'seed': p.HIDDEN_SEED,
    },
    capabilities=Capabilities(supports_audio_generation=True, fixed_duration=5),
)

WAN_PRO_IMAGE = ModelDescriptor(
    id='WAN_PRO_IMAGE',
    display_name='Wan Pro (Image)',
    endpoint='fal-ai/wan-pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Wan',
    description='Open-source 1080p model animating still images with strong motion diversity.',
    categories=('wan',),
    cost=FixedCost('0.8'),
    fields=('prompt', 'imageBase64'),
)

WAN_2_2_TURBO_IMAGE = ModelDescriptor(
    id='WAN_2_2_TURBO_IMAGE',
    display_name='Wan-2.2 Turbo (Image)',
    endpoint='fal-ai/wan/v2.2-a14b/image-to-video/turbo',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Wan',
    description='Fast image-to-video with optional end frame.',
    features=('Fast', '720p', 'End Frame'),
    categories=('wan',),
    cost=PerSecondCost('0.02'),
    fields=('prompt', 'imageBase64', 'endFrameImageBase64', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS},
    capabilities=Capabilities(supports_end_frame=True, fixed_duration=5),
)

MODELS = (
    WAN_ANIMATE_REPLACE,
    WAN_ANIMATE_MOVE,
    WAN_PRO,
    WAN_2_2_TURBO,
    WAN_2_5_TEXT,
    WAN_2_5_IMAGE,
    WAN_PRO_IMAGE,
    WAN_2_2_TURBO_IMAGE,
)
