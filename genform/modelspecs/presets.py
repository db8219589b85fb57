"""Option lists and field configurations shared by several catalog families."""

from __future__ import annotations

from genform.modelspecs.base import (
    FieldConfiguration,
    FieldOption,
    NumberConfig,
    SelectConfig,
    TextConfig,
    ToggleConfig,
)


VIDEO_TABS_TEXT = ('text-to-video',)
VIDEO_TABS_IMAGE = ('image-to-video',)
VIDEO_TABS_VIDEO = ('video-to-video',)


LANDSCAPE = FieldOption('16:9', 'Landscape (16:9)')
PORTRAIT = FieldOption('9:16', 'Portrait (9:16)')
SQUARE = FieldOption('1:1', 'Square (1:1)')
STANDARD_4_3 = FieldOption('4:3', 'Standard (4:3)')
PORTRAIT_3_4 = FieldOption('3:4', 'Portrait (3:4)')
ULTRAWIDE = FieldOption('21:9', 'Ultrawide (21:9)')
VERTICAL = FieldOption('9:21', 'Vertical (9:21)')
AUTO_RATIO = FieldOption('auto', 'Auto (Best Match)')

RES_480 = FieldOption('480p', '480p (SD)')
RES_720 = FieldOption('720p', '720p (HD)')
RES_1080 = FieldOption('1080p', '1080p (Full HD)')
RES_1440 = FieldOption('1440p', '1440p (2K)')
RES_2160 = FieldOption('2160p', '2160p (4K)')

SEEDANCE_DURATIONS = ('3', '4', '5', '6', '7', '8', '9', '10', '11', '12')
FIVE_OR_TEN = ('5', '10')

PIKA_RATIOS = (
    LANDSCAPE,
    PORTRAIT,
    SQUARE,
    FieldOption('4:5', 'Portrait (4:5)'),
    FieldOption('5:4', 'Landscape (5:4)'),
    FieldOption('3:2', 'Landscape (3:2)'),
    FieldOption('2:3', 'Portrait (2:3)'),
)

PIXVERSE_STYLES = (
    FieldOption('default', 'Default'),
    FieldOption('anime', 'Anime'),
    FieldOption('3d_animation', '3D Animation'),
    FieldOption('clay', 'Clay'),
    FieldOption('comic', 'Comic'),
    FieldOption('cyberpunk', 'Cyberpunk'),
)

MOVEMENT_AMPLITUDES = ('auto', 'low', 'medium', 'high')


def duration(options, default: str, user_selectable: bool = True) -> SelectConfig:
    return SelectConfig(choices=tuple(options), default=default, label='Duration', user_selectable=user_selectable)


def aspect_ratio(options, default: str = '16:9', user_selectable: bool = True) -> SelectConfig:
    return SelectConfig(choices=tuple(options), default=default, label='Aspect Ratio', user_selectable=user_selectable)


def resolution(options, default: str = '720p', user_selectable: bool = True) -> SelectConfig:
    return SelectConfig(choices=tuple(options), default=default, label='Resolution', user_selectable=user_selectable)


NEGATIVE_PROMPT = TextConfig(
    default='',
    label='Negative Prompt',
    multiline=True,
    placeholder="Describe what you don't want in the video...",
    help_text='Optional: Specify elements to avoid in the generated video',
)
ENHANCE_PROMPT = ToggleConfig(default=True, label='Enhance prompt automatically')
PROMPT_OPTIMIZER = ToggleConfig(default=True, label='Use prompt optimizer')
CAMERA_FIXED = ToggleConfig(default=False, label='Fix camera position')
LOOP = ToggleConfig(default=False, label='Loop video (blend end with beginning)')
ADD_AUDIO = ToggleConfig(default=False, label='Add audio to video')
HIDDEN_SEED = NumberConfig(label='Seed', user_selectable=False, help_text='Random seed for reproducible results')
PIXVERSE_STYLE = SelectConfig(choices=PIXVERSE_STYLES, default='default', label='Style')
MOVEMENT_AMPLITUDE = SelectConfig(
    choices=MOVEMENT_AMPLITUDES,
    default='auto',
    label='Movement Amplitude',
    help_text='Control the intensity of motion in the video',
)
TEMPLATE = FieldConfiguration(default='hug', label='Template')
