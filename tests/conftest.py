"""Shared pytest fixtures."""

import pytest

ATOM_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Feed</title>
  <subtitle>A subtitle.</subtitle>
  <link rel="self" href="http://example.org/feed/"/>
  <link href="http://example.org/"/>
  <id>urn:uuid:60a76c80-d399-11d9-b91C-0003939e0af6</id>
  <updated>2003-12-13T18:30:02Z</updated>
  <author>
    <name>John Doe</name>
    <email>johndoe@example.com</email>
  </author>
  <generator>Example Toolkit</generator>
  <rights>Copyright (c) 2003, John Doe</rights>
  <entry>
    <title>Atom-Powered Robots Run Amok</title>
    <link href="http://example.org/2003/12/13/atom03"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2003-12-13T18:30:02Z</updated>
    <published>2003-12-13T08:29:29-04:00</published>
    <summary>Some text.</summary>
    <content type="html"><![CDATA[<p>Robots <b>everywhere</b></p>]]></content>
    <source>
      <id>urn:uuid:source-feed</id>
      <title>Source Feed</title>
      <updated>2003-12-01T00:00:00Z</updated>
    </source>
  </entry>
</feed>
"""

RSS_FEED = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Liftoff News</title>
    <link>http://liftoff.msfc.nasa.gov/</link>
    <description>Liftoff to Space Exploration.</description>
    <language>en-us</language>
    <pubDate>Tue, 10 Jun 2003 04:00:00 GMT</pubDate>
    <lastBuildDate>Tue, 10 Jun 2003 09:41:01 GMT</lastBuildDate>
    <generator>Weblog Editor 2.0</generator>
    <managingEditor>editor@example.com</managingEditor>
    <category>Space</category>
    <item>
      <title>Star City</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
      <description>How do Americans get ready to work with Russians?</description>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
      <guid>http://liftoff.msfc.nasa.gov/2003/06/03.html#item573</guid>
      <category>Science</category>
      <category>Russia</category>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def atom_xml() -> str:
    """A small Atom document with one entry."""
    return ATOM_FEED


@pytest.fixture
def rss_xml() -> str:
    """A small RSS 2.0 document with one item."""
    return RSS_FEED
