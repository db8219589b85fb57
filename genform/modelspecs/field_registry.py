from __future__ import annotations

from typing import Dict, List, Optional

from genform.modelspecs.base import FieldOption, ModelDescriptor
from genform.modelspecs.fields import ConditionalLogic, FieldKind, FieldMetadata, ValidationRules


MB = 1024 * 1024
IMAGE_SIZE_LIMIT = 10 * MB
VIDEO_SIZE_LIMIT = 100 * MB


def _prompt_limit(model: ModelDescriptor) -> int:
    return model.capabilities.prompt_character_limit or 1500


def _negative_prompt_limit(model: ModelDescriptor) -> int:
    return model.capabilities.negative_prompt_character_limit or 1500


def _has_variable_duration(model: ModelDescriptor) -> bool:
    return not model.capabilities.fixed_duration


_NUMBER_OF_IMAGES = (
    FieldOption('1', '1 Image'),
    FieldOption('2', '2 Images'),
    FieldOption('3', '3 Images'),
    FieldOption('4', '4 Images'),
)


FIELD_REGISTRY: Dict[str, FieldMetadata] = {
    # text
    'prompt': FieldMetadata(
        name='prompt',
        kind=FieldKind.TEXTAREA,
        component='PromptTextarea',
        label='Prompt',
        placeholder='Describe what you want to generate...',
        help_text='Be specific and detailed for best results',
        validation=ValidationRules(required=True, min_length=3, max_length=_prompt_limit),
    ),
    'negativePrompt': FieldMetadata(
        name='negativePrompt',
        kind=FieldKind.TEXTAREA,
        component='PromptTextarea',
        label='Negative Prompt',
        placeholder="Describe what you don't want in the video...",
        help_text='Optional: Specify elements to avoid in the generated video',
        validation=ValidationRules(max_length=_negative_prompt_limit),
    ),
    'style_prompt': FieldMetadata(
        name='style_prompt',
        kind=FieldKind.TEXTAREA,
        component='PromptTextarea',
        label='Style Prompt',
        help_text='Describe the style to apply to the uploaded image',
        supported_tabs=('restyle',),
        validation=ValidationRules(max_length=_prompt_limit),
    ),
    # single files
    'imageBase64': FieldMetadata(
        name='imageBase64',
        kind=FieldKind.FILE_SINGLE,
        component='ImageUploadField',
        label='Start Image',
        accept='image/*',
        preview=True,
        size_limit=IMAGE_SIZE_LIMIT,
        help_text='Upload an image to animate or use as reference',
    ),
    'videoBase64': FieldMetadata(
        name='videoBase64',
        kind=FieldKind.FILE_SINGLE,
        component='VideoUploadField',
        label='Source Video',
        accept='video/*',
        preview=True,
        size_limit=VIDEO_SIZE_LIMIT,
        help_text='Upload a video to transform or animate',
        validation=ValidationRules(max_duration=10),
    ),
    'endFrameImageBase64': FieldMetadata(
        name='endFrameImageBase64',
        kind=FieldKind.FILE_SINGLE,
        component='ImageUploadField',
        label='End Frame',
        accept='image/*',
        preview=True,
        size_limit=IMAGE_SIZE_LIMIT,
        help_text='Optional: Upload an end frame for transitions',
        conditional=ConditionalLogic(requires_capability='supports_end_frame'),
    ),
    'original_image': FieldMetadata(
        name='original_image',
        kind=FieldKind.FILE_SINGLE,
        component='ImageUploadField',
        label='Original Image',
        accept='image/*',
        preview=True,
        size_limit=IMAGE_SIZE_LIMIT,
        upload_to_cloud=True,
        backend_key='original_image_url',
        help_text='Upload the image you want to restyle',
        supported_tabs=('restyle',),
    ),
    # multiple files
    'referenceImageUrls': FieldMetadata(
        name='referenceImageUrls',
        kind=FieldKind.FILE_MULTIPLE,
        component='MultiImageUploadField',
        label='Reference Images',
        accept='image/*',
        preview=True,
        upload_to_cloud=True,
        help_text='Upload 1-4 reference images (ingredients) for consistent subject appearance',
        validation=ValidationRules(min_files=1, max_files=4),
    ),
    'scenesImages': FieldMetadata(
        name='scenesImages',
        kind=FieldKind.FILE_MULTIPLE,
        component='SceneImagesUploadField',
        label='Scene Images',
        accept='image/*',
        preview=True,
        reorderable=True,
        help_text='Upload 2-16 scene images. Drag to reorder sequence.',
        validation=ValidationRules(min_files=2, max_files=16),
    ),
    'reference_images': FieldMetadata(
        name='reference_images',
        kind=FieldKind.FILE_MULTIPLE,
        component='MultiImageUploadField',
        label='Reference Images',
        accept='image/*',
        preview=True,
        upload_to_cloud=True,
        backend_key='reference_image_urls',
        help_text='Upload up to 3 reference images',
        supported_tabs=('image-reference',),
        validation=ValidationRules(max_files=3),
    ),
    # url arrays
    'tail_image_url': FieldMetadata(
        name='tail_image_url',
        kind=FieldKind.URL_ARRAY,
        component='TailImageUrlField',
        label='Tail Image',
        accept='image/*',
        help_text='Optional: URL to continuation frame image',
        conditional=ConditionalLogic(requires_capability='supports_tail_image'),
    ),
    # selects
    'duration': FieldMetadata(
        name='duration',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Duration',
        help_text='Video length in seconds',
        conditional=ConditionalLogic(show_if=_has_variable_duration),
    ),
    'aspectRatio': FieldMetadata(
        name='aspectRatio',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Aspect Ratio',
        help_text='Video dimensions ratio',
    ),
    'aspect_ratio': FieldMetadata(
        name='aspect_ratio',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Aspect Ratio',
        help_text='Choose the aspect ratio of the generated image',
    ),
    'resolution': FieldMetadata(
        name='resolution',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Resolution',
        help_text='Output quality (higher = more credits)',
    ),
    'pixverseStyles': FieldMetadata(
        name='pixverseStyles',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Style',
        help_text='Visual style for the generated video',
    ),
    'pikaScenesIngredient': FieldMetadata(
        name='pikaScenesIngredient',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Mode',
        options=(
            FieldOption('creative', 'Creative', 'Artistic interpretation'),
            FieldOption('precise', 'Precise', 'Accurate to scenes'),
        ),
        help_text='Creative mode for artistic results, Precise for accurate interpretation',
    ),
    'num_images': FieldMetadata(
        name='num_images',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Number of Images',
        help_text='How many variations to generate',
        default=1,
        options=_NUMBER_OF_IMAGES,
    ),
    'quantity': FieldMetadata(
        name='quantity',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Number of Images',
        help_text='How many variations to generate',
        backend_key='num_images',
        default=1,
        options=_NUMBER_OF_IMAGES,
    ),
    'quality': FieldMetadata(
        name='quality',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Quality',
        help_text='Choose rendering quality',
    ),
    'output_quality': FieldMetadata(
        name='output_quality',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Output Quality',
        help_text='Choose rendering quality',
        backend_key='quality',
    ),
    'rendering_speed': FieldMetadata(
        name='rendering_speed',
        kind=FieldKind.SELECT,
        component='SelectField',
        label='Rendering Speed',
        help_text='Balance between speed and fidelity',
    ),
    'template': FieldMetadata(
        name='template',
        kind=FieldKind.TEMPLATE_SELECT,
        component='ViduTemplateSelector',
        label='Template',
        categories=('STANDARD', 'PREMIUM', 'ADVANCED'),
        help_text='Choose a template. Higher tiers cost more credits.',
    ),
    # toggles
    'enhancePrompt': FieldMetadata(
        name='enhancePrompt',
        kind=FieldKind.TOGGLE,
        component='ToggleField',
        label='Enhance prompt automatically',
        help_text='AI will improve your prompt for better results',
    ),
    'promptOptimizer': FieldMetadata(
        name='promptOptimizer',
        kind=FieldKind.TOGGLE,
        component='ToggleField',
        label='Use prompt optimizer',
        help_text='Optimize prompt for better video generation',
    ),
    'loop': FieldMetadata(
        name='loop',
        kind=FieldKind.TOGGLE,
        component='ToggleField',
        label='Loop video (blend end with beginning)',
        help_text='Create a seamless loop',
    ),
    'cameraFixed': FieldMetadata(
        name='cameraFixed',
        kind=FieldKind.TOGGLE,
        component='ToggleField',
        label='Fix camera position',
        help_text='Lock camera to prevent movement',
    ),
    'addAudioToVideo': FieldMetadata(
        name='addAudioToVideo',
        kind=FieldKind.TOGGLE,
        component='ToggleField',
        label='Add audio to video',
        help_text='Generate audio for the video',
    ),
    # sliders and numbers
    'movementAmplitude': FieldMetadata(
        name='movementAmplitude',
        kind=FieldKind.SLIDER,
        component='MovementAmplitudeSlider',
        label='Movement Amplitude',
        options=(
            FieldOption('auto', 'auto'),
            FieldOption('low', 'low'),
            FieldOption('medium', 'medium'),
            FieldOption('high', 'high'),
        ),
        help_text='Control the intensity of motion in the video',
    ),
    'shift': FieldMetadata(
        name='shift',
        kind=FieldKind.SLIDER,
        component='SliderField',
        label='Shift',
        help_text='Control the transformation intensity',
        min=0,
        max=10,
        validation=ValidationRules(min=0, max=10),
    ),
    'guidance': FieldMetadata(
        name='guidance',
        kind=FieldKind.SLIDER,
        component='SliderField',
        label='Guidance',
        help_text='Control prompt adherence vs. creativity',
        min=0,
        max=20,
        step=0.5,
        validation=ValidationRules(min=0, max=20),
    ),
    'steps': FieldMetadata(
        name='steps',
        kind=FieldKind.NUMBER,
        component='NumberField',
        label='Steps',
        help_text='Number of diffusion steps',
        min=1,
        max=100,
        validation=ValidationRules(min=1, max=100),
    ),
    'seed': FieldMetadata(
        name='seed',
        kind=FieldKind.NUMBER,
        component='NumberField',
        label='Seed',
        help_text='Random seed for reproducible results (leave empty for random)',
        min=0,
        max=999999999,
        validation=ValidationRules(min=0, max=999999999),
    ),
}


def get_registered_field(name: str) -> Optional[FieldMetadata]:
    return FIELD_REGISTRY.get(name)


def is_field_registered(name: str) -> bool:
    return name in FIELD_REGISTRY


def registered_fields() -> List[str]:
    return list(FIELD_REGISTRY.keys())
