"""Track name and type extraction."""

from typing import ClassVar

from xmpdm.extractors.base import BaseExtractor, ExtractionContext
from xmpdm.schema import RDF, Property


class TrackExtractor(BaseExtractor):
    """Extract the first track of the first xmpDM:Tracks bag.

    The depth of xmpDM:Tracks is not fixed, so the whole document is
    searched. Only the first track found is reported even though the bag
    may list several.
    """

    name: ClassVar[str] = "tracks"
    priority: ClassVar[int] = 40

    def extract(self, context: ExtractionContext) -> None:
        tracks = next(context.root.iter_all(Property.TRACKS), None)
        if tracks is None:
            return

        track = tracks.descend(RDF.BAG, RDF.LI)
        if track is None:
            return

        track_type = track.field(Property.TRACK_TYPE)
        if track_type is not None:
            context.fields["track_type"] = track_type

        track_name = track.field(Property.TRACK_NAME)
        if track_name is not None:
            context.fields["track_name"] = track_name
