"""Simple description properties: title, creator tool, rates, field order."""

from typing import ClassVar

from xmpdm.extractors.base import BaseExtractor, ExtractionContext, parse_float, parse_int
from xmpdm.schema import RDF, Property


class BasicExtractor(BaseExtractor):
    """Extract the scalar properties of the description container.

    Example:
        <xmp:CreatorTool>Adobe Premiere Pro 2022.0 (Macintosh)</xmp:CreatorTool>
        <xmpDM:videoFrameRate>25.000000</xmpDM:videoFrameRate>
        <xmpDM:audioSampleRate>48000</xmpDM:audioSampleRate>
    """

    name: ClassVar[str] = "basic"
    priority: ClassVar[int] = 10

    # field name -> property holding a verbatim string
    STRING_FIELDS: ClassVar[dict[str, Property]] = {
        "creator_tool": Property.CREATOR_TOOL,
        "create_date": Property.CREATE_DATE,
        "audio_channel_type": Property.AUDIO_CHANNEL_TYPE,
        "video_field_order": Property.VIDEO_FIELD_ORDER,
    }

    FLOAT_FIELDS: ClassVar[dict[str, Property]] = {
        "nominal_frame_rate": Property.VIDEO_FRAME_RATE,
        "audio_sample_rate": Property.AUDIO_SAMPLE_RATE,
    }

    INT_FIELDS: ClassVar[dict[str, Property]] = {
        "start_time_scale": Property.START_TIME_SCALE,
        "start_time_sample_size": Property.START_TIME_SAMPLE_SIZE,
    }

    def extract(self, context: ExtractionContext) -> None:
        """Extract scalar properties and the title."""
        desc = context.description
        if desc is None:
            return

        fields = context.fields
        for key, prop in self.STRING_FIELDS.items():
            value = desc.field(prop)
            if value is not None:
                fields[key] = value

        for key, prop in self.FLOAT_FIELDS.items():
            number = parse_float(desc.field(prop))
            if number is not None:
                fields[key] = number

        for key, prop in self.INT_FIELDS.items():
            integer = parse_int(desc.field(prop))
            if integer is not None:
                fields[key] = integer

        # <dc:title><rdf:Alt><rdf:li xml:lang="x-default">...</rdf:li></rdf:Alt></dc:title>
        title = desc.descend(Property.TITLE, RDF.ALT, RDF.LI)
        if title is not None and title.value is not None:
            fields["title"] = title.value
