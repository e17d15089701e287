"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from xmpdm import config as config_module

NAMESPACE_DECLARATIONS = (
    'xmlns:xmp="http://ns.adobe.com/xap/1.0/" '
    'xmlns:xmpDM="http://ns.adobe.com/xmp/1.0/DynamicMedia/" '
    'xmlns:xmpMM="http://ns.adobe.com/xap/1.0/mm/" '
    'xmlns:stDim="http://ns.adobe.com/xap/1.0/sType/Dimensions#" '
    'xmlns:dc="http://purl.org/dc/elements/1.1/"'
)

# Premiere Pro style packet: element form, markers both per track and at
# document level
PREMIERE_BODY = """
   <xmp:CreatorTool>Adobe Premiere Pro 2022.0 (Macintosh)</xmp:CreatorTool>
   <xmp:CreateDate>2021-12-04T22:13:58Z</xmp:CreateDate>
   <xmpDM:videoFrameRate>25.000000</xmpDM:videoFrameRate>
   <xmpDM:videoFieldOrder>Progressive</xmpDM:videoFieldOrder>
   <xmpDM:audioSampleRate>48000</xmpDM:audioSampleRate>
   <xmpDM:audioChannelType>Stereo</xmpDM:audioChannelType>
   <xmpDM:startTimeScale>25</xmpDM:startTimeScale>
   <xmpDM:startTimeSampleSize>1</xmpDM:startTimeSampleSize>
   <xmpDM:videoFrameSize rdf:parseType="Resource">
    <stDim:w>1920</stDim:w>
    <stDim:h>1080</stDim:h>
    <stDim:unit>pixel</stDim:unit>
   </xmpDM:videoFrameSize>
   <xmpDM:startTimecode rdf:parseType="Resource">
    <xmpDM:timeFormat>25Timecode</xmpDM:timeFormat>
    <xmpDM:timeValue>01:00:00:00</xmpDM:timeValue>
   </xmpDM:startTimecode>
   <xmpDM:altTimecode rdf:parseType="Resource">
    <xmpDM:timeValue>10:00:00:00</xmpDM:timeValue>
    <xmpDM:timeFormat>25Timecode</xmpDM:timeFormat>
   </xmpDM:altTimecode>
   <xmpDM:duration rdf:parseType="Resource">
    <xmpDM:value>8800</xmpDM:value>
    <xmpDM:scale>1/2500</xmpDM:scale>
   </xmpDM:duration>
   <dc:title>
    <rdf:Alt>
     <rdf:li xml:lang="x-default">HELLO</rdf:li>
    </rdf:Alt>
   </dc:title>
   <xmpDM:Tracks>
    <rdf:Bag>
     <rdf:li rdf:parseType="Resource">
      <xmpDM:trackName>Markers</xmpDM:trackName>
      <xmpDM:trackType>Comment</xmpDM:trackType>
      <xmpDM:frameRate>f25</xmpDM:frameRate>
      <xmpDM:markers>
       <rdf:Seq>
        <rdf:li rdf:parseType="Resource">
         <xmpDM:startTime>57</xmpDM:startTime>
         <xmpDM:duration>8</xmpDM:duration>
         <xmpDM:name>h</xmpDM:name>
         <xmpDM:guid>0da28cca-90e6-410f-92f7-ecc84f8bccb6</xmpDM:guid>
        </rdf:li>
        <rdf:li rdf:parseType="Resource">
         <xmpDM:startTime>100</xmpDM:startTime>
         <xmpDM:name>second</xmpDM:name>
         <xmpDM:comment>check the cut</xmpDM:comment>
        </rdf:li>
       </rdf:Seq>
      </xmpDM:markers>
     </rdf:li>
    </rdf:Bag>
   </xmpDM:Tracks>
   <xmpDM:markers>
    <rdf:Seq>
     <rdf:li rdf:parseType="Resource">
      <xmpDM:startTime>200</xmpDM:startTime>
      <xmpDM:type>Chapter</xmpDM:type>
      <xmpDM:name>Chapter 1</xmpDM:name>
     </rdf:li>
    </rdf:Seq>
   </xmpDM:markers>
"""

# Attribute form with nested rdf:Description structs, as written by CC 2013+
ATTRIBUTE_FORM_XMP = """<x:xmpmeta xmlns:x="adobe:ns:meta/">
 <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
  <rdf:Description rdf:about="" {namespaces}
    xmp:CreatorTool="Adobe After Effects 2023"
    xmpDM:videoFrameRate="29.970030"
    xmpDM:audioSampleRate="48000">
   <xmpDM:startTimecode xmpDM:timeFormat="2997DropTimecode" xmpDM:timeValue="00:59:58;00"/>
   <xmpDM:duration xmpDM:value="1001" xmpDM:scale="1/30000"/>
   <xmpDM:Tracks>
    <rdf:Bag>
     <rdf:li>
      <rdf:Description xmpDM:trackName="Markers" xmpDM:trackType="Comment">
       <xmpDM:markers>
        <rdf:Seq>
         <rdf:li>
          <rdf:Description xmpDM:startTime="150" xmpDM:name="Intro" xmpDM:type="Chapter"/>
         </rdf:li>
        </rdf:Seq>
       </xmpDM:markers>
      </rdf:Description>
     </rdf:li>
    </rdf:Bag>
   </xmpDM:Tracks>
  </rdf:Description>
 </rdf:RDF>
</x:xmpmeta>""".format(namespaces=NAMESPACE_DECLARATIONS)


def wrap_description(body: str, packet: bool = False) -> str:
    """Wrap description content in a complete XMP document."""
    document = (
        '<x:xmpmeta xmlns:x="adobe:ns:meta/" x:xmptk="Adobe XMP Core 7.1-c000">\n'
        ' <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">\n'
        f'  <rdf:Description rdf:about="" {NAMESPACE_DECLARATIONS}>'
        f"{body}"
        "  </rdf:Description>\n"
        " </rdf:RDF>\n"
        "</x:xmpmeta>"
    )
    if packet:
        document = (
            '<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>\n'
            f"{document}\n"
            '<?xpacket end="w"?>'
        )
    return document


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and XMPDM_* variables out of the tests."""
    monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "no-config.yaml"])
    for key in ("USE_SIDECAR", "SIDECAR_EXTENSION", "HTTP_TIMEOUT", "HTTP_MAX_DOWNLOAD_MB"):
        monkeypatch.delenv(f"XMPDM_{key}", raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def xmp() -> Callable[..., str]:
    """Build an XMP document from rdf:Description content."""
    return wrap_description


@pytest.fixture
def premiere_xmp() -> str:
    """Premiere-style XMP document."""
    return wrap_description(PREMIERE_BODY)


@pytest.fixture
def premiere_packet() -> bytes:
    """Premiere-style XMP packet, as embedded in media files."""
    return wrap_description(PREMIERE_BODY, packet=True).encode("utf-8")


@pytest.fixture
def attribute_form_xmp() -> str:
    """XMP document using attributes and nested rdf:Description structs."""
    return ATTRIBUTE_FORM_XMP
