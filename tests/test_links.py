"""Tests for link extraction."""

from __future__ import annotations

from mdexporter.links import LinkSet, extract_links, safe_decode, split_target


def test_extract_links_classifies_images_and_notes() -> None:
    text = (
        "# Title\n"
        "![[a.png]]\n"
        "![diagram](b.jpg)\n"
        "See [[Note2]] and [[Other Note]].\n"
    )

    links = extract_links(text)

    assert links == LinkSet(images=("a.png", "b.jpg"), md_files=("Note2", "Other Note"))


def test_image_references_are_never_note_links() -> None:
    text = "[[pic.png]] [[photo.jpg]] ![[embedded.png]] [[sized.png|300]] [[Real]]"

    links = extract_links(text)

    assert links.md_files == ("Real",)
    assert all(not link.endswith((".png", ".jpg")) for link in links.md_files)


def test_images_are_deduplicated_in_first_appearance_order() -> None:
    text = "![](b.png)\n![[a.png]]\n![x](b.png)\n![[c.png]]\n![[a.png]]\n"

    assert extract_links(text).images == ("b.png", "a.png", "c.png")


def test_standard_embeds_are_percent_decoded_before_deduplication() -> None:
    text = "![one](my%20pic.png) ![two](my pic.png)"

    assert extract_links(text).images == ("my pic.png",)


def test_malformed_escapes_keep_the_raw_target() -> None:
    text = "![](100%.png) ![](bad%E0%A4.png)"

    assert extract_links(text).images == ("100%.png", "bad%E0%A4.png")


def test_note_links_are_deduplicated() -> None:
    assert extract_links("[[A]] [[B]] [[A]]").md_files == ("A", "B")


def test_text_without_links_yields_empty_set() -> None:
    assert extract_links("") == LinkSet()
    assert extract_links("plain text [not a link](x.md)") == LinkSet()


def test_safe_decode_handles_utf8_sequences() -> None:
    assert safe_decode("caf%C3%A9.png") == "café.png"
    assert safe_decode("plain.png") == "plain.png"


def test_split_target_drops_heading_and_alias() -> None:
    assert split_target("Note#Section|Shown") == "Note"
    assert split_target("pic.png|300") == "pic.png"
    assert split_target("Plain") == "Plain"
