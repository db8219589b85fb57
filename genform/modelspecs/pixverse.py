from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FixedCost, ModelDescriptor, PerSecondCost


_RATIOS = p.aspect_ratio((p.LANDSCAPE, p.STANDARD_4_3, p.SQUARE, p.PORTRAIT, p.PORTRAIT_3_4))


PIXVERSE = ModelDescriptor(
    id='PIXVERSE',
    display_name='Pixverse',
    endpoint='fal-ai/pixverse/v5/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Pixverse',
    description='Pixverse v5 text-to-video model.',
    features=('Styles',),
    categories=('pixverse',),
    cost=PerSecondCost('0.16'),
    fields=('pixverseStyles', 'prompt', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS, 'pixverseStyles': p.PIXVERSE_STYLE},
)

PIXVERSE_IMAGE = ModelDescriptor(
    id='PIXVERSE_IMAGE',
    display_name='Pixverse (Image)',
    endpoint='fal-ai/pixverse/v5/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Pixverse',
    description='Pixverse v5 image-to-video model.',
    features=('Styles',),
    categories=('pixverse',),
    cost=PerSecondCost('0.16'),
    fields=('pixverseStyles', 'prompt', 'imageBase64', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS, 'pixverseStyles': p.PIXVERSE_STYLE},
)

PIXVERSE_IMAGE_TRANSITION = ModelDescriptor(
    id='PIXVERSE_IMAGE_TRANSITION',
    display_name='Pixverse Transition',
    endpoint='fal-ai/pixverse/v5/transition',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Pixverse',
    description='Smooth transition between a start and an end frame.',
    features=('Image Transition', 'End Frame'),
    categories=('pixverse',),
    cost=FixedCost('0.32'),
    fields=('pixverseStyles', 'prompt', 'imageBase64', 'endFrameImageBase64', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS, 'pixverseStyles': p.PIXVERSE_STYLE},
    capabilities=Capabilities(supports_end_frame=True, fixed_duration=5),
)

MODELS = (PIXVERSE, PIXVERSE_IMAGE, PIXVERSE_IMAGE_TRANSITION)
