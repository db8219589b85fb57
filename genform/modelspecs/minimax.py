from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FixedCost, ModelDescriptor, PerSecondCost


_LIVE2D = 'Live2D-ready clips with built-in prompt optimizer, facial control and smooth animation flow.'


MINIMAX = ModelDescriptor(
    id='MINIMAX',
    display_name='Minimax',
    endpoint='fal-ai/minimax/video-01-live',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Minimax',
    description=_LIVE2D,
    features=('Prompt Optimizer',),
    categories=('minimax',),
    cost=FixedCost('0.5'),
    fields=('prompt', 'promptOptimizer'),
    field_options={'promptOptimizer': p.PROMPT_OPTIMIZER},
)

MINIMAX_DIRECTOR = ModelDescriptor(
    id='MINIMAX_DIRECTOR',
    display_name='Minimax Director',
    endpoint='fal-ai/minimax/video-01-director',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Minimax',
    description='Director mode for enhanced shot control using camera movement instructions.',
    features=('Advanced',),
    categories=('minimax',),
    cost=FixedCost('0.5'),
    fields=('prompt',),
)

HAILUO_2_3_STANDARD_TEXT = ModelDescriptor(
    id='HAILUO_2_3_STANDARD_TEXT',
    display_name='Hailuo 2.3 [Standard]',
    endpoint='fal-ai/minimax/hailuo-2.3/standard/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Minimax',
    description='Advanced text-to-video generation model with 768p resolution. Balanced quality and speed.',
    features=('Prompt Optimizer', '768p'),
    categories=('minimax', 'recommended'),
    cost=PerSecondCost('0.047'),
    fields=('prompt', 'duration', 'promptOptimizer'),
    field_options={'duration': p.duration(('6', '10'), '6'), 'promptOptimizer': p.PROMPT_OPTIMIZER},
)

HAILUO_TEXT = ModelDescriptor(
    id='HAILUO_TEXT',
    display_name='Hailuo 02 Pro',
    endpoint='fal-ai/minimax/hailuo-02/pro/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Minimax',
    description='High-quality text-to-video generation with Hailuo 02 Pro model.',
    features=('Prompt Optimizer', '1080p'),
    categories=('minimax', 'recommended'),
    cost=FixedCost('0.48'),
    fields=('prompt', 'promptOptimizer'),
    field_options={'promptOptimizer': p.PROMPT_OPTIMIZER},
    capabilities=Capabilities(fixed_duration=6),
)

MINIMAX_IMAGE = ModelDescriptor(
    id='MINIMAX_IMAGE',
    display_name='Minimax (Image)',
    endpoint='fal-ai/minimax/video-01-live/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Minimax',
    description=_LIVE2D,
    features=('Prompt Optimizer',),
    categories=('minimax',),
    cost=FixedCost('0.5'),
    fields=('prompt', 'imageBase64', 'promptOptimizer'),
    field_options={'promptOptimizer': p.PROMPT_OPTIMIZER},
)

HAILUO_IMAGE = ModelDescriptor(
    id='HAILUO_IMAGE',
    display_name='Hailuo 02 Pro (Image)',
    endpoint='fal-ai/minimax/hailuo-02/pro/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Minimax',
    description='High-quality image-to-video generation with Hailuo 02 Pro model.',
    features=('Prompt Optimizer', '1080p', 'End Frame'),
    categories=('minimax', 'recommended'),
    cost=FixedCost('0.48'),
    fields=('prompt', 'imageBase64', 'endFrameImageBase64', 'promptOptimizer'),
    field_options={'promptOptimizer': p.PROMPT_OPTIMIZER},
    capabilities=Capabilities(supports_end_frame=True, fixed_duration=6),
)

HAILUO_2_3_FAST_STANDARD_IMAGE = ModelDescriptor(
    id='HAILUO_2_3_FAST_STANDARD_IMAGE',
    display_name='Hailuo 2.3 Fast [Standard] (Image)',
    endpoint='fal-ai/minimax/hailuo-2.3-fast/standard/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Minimax',
    description='Faster image-to-video generation with Hailuo 2.3 at 768p.',
    features=('Fast', 'Prompt Optimizer', '768p'),
    categories=('minimax',),
    cost=PerSecondCost('0.032'),
    fields=('prompt', 'imageBase64', 'duration', 'promptOptimizer'),
    field_options={'duration': p.duration(('6', '10'), '6'), 'promptOptimizer': p.PROMPT_OPTIMIZER},
)

MODELS = (
    MINIMAX,
    MINIMAX_DIRECTOR,
    HAILUO_2_3_STANDARD_TEXT,
    HAILUO_TEXT,
    MINIMAX_IMAGE,
    HAILUO_IMAGE,
    HAILUO_2_3_FAST_STANDARD_IMAGE,
)
