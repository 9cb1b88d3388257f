"""
Unit tests for hierarchy classification and nesting rules.
"""

import pytest

from biiif_csv.core.errors import HierarchyError
from biiif_csv.core.models import NodeRole
from biiif_csv.hierarchy.classifier import (
    classify_hierarchy,
    classify_segment,
    parse_canvas_index,
    strip_canvas_marker,
)
from biiif_csv.hierarchy.nesting import validate_nesting


class TestClassifySegment:
    """Tests for single segment roles."""

    @pytest.mark.parametrize(
        "segment, role",
        [
            ("canvas1", NodeRole.CANVAS),
            ("canvas", NodeRole.CANVAS),
            ("_canvas12", NodeRole.CANVAS),
            ("manifest1", NodeRole.MANIFEST),
            ("letters_manifest", NodeRole.MANIFEST),
            ("photos", NodeRole.COLLECTION),
            ("mycanvas1", NodeRole.COLLECTION),
            ("Canvas1", NodeRole.COLLECTION),
        ],
    )
    def test_roles(self, segment, role):
        """Test that the segment text decides the role."""
        assert classify_segment(segment) is role

    def test_canvas_takes_precedence_over_manifest(self):
        """Test that a canvas segment mentioning manifest is still a canvas."""
        assert classify_segment("canvas_manifest") is NodeRole.CANVAS


class TestClassifyHierarchy:
    """Tests for full hierarchy paths."""

    def test_canvas_gets_marker(self):
        """Test that the canvas directory is prefixed with the marker."""
        node = classify_hierarchy("root/photos/manifest1/canvas1")

        assert node.role is NodeRole.CANVAS
        assert node.segments == ("root", "photos", "manifest1", "_canvas1")
        assert node.name == "_canvas1"
        assert node.original_segment == "canvas1"
        assert node.parent_segment == "manifest1"
        assert node.parent_role is NodeRole.MANIFEST

    @pytest.mark.parametrize("segment", ["canvas1", "canvas_front", "canvas007", "canvas"])
    def test_marker_is_reversible(self, segment):
        """Test that stripping the marker gives back the original segment."""
        node = classify_hierarchy(f"collection/manifest/{segment}")

        assert node.name.startswith("_")
        assert strip_canvas_marker(node.name) == segment

    def test_already_marked_canvas_is_not_marked_twice(self):
        """Test that a hierarchy written with the marker keeps a single marker."""
        node = classify_hierarchy("root/manifest1/_canvas1")

        assert node.role is NodeRole.CANVAS
        assert node.name == "_canvas1"

    def test_manifest_and_collection_are_unchanged(self):
        """Test that only canvases are renamed."""
        manifest = classify_hierarchy("root/manifest1")
        collection = classify_hierarchy("root/photos")

        assert manifest.role is NodeRole.MANIFEST
        assert manifest.segments == ("root", "manifest1")
        assert collection.role is NodeRole.COLLECTION
        assert collection.segments == ("root", "photos")

    def test_root_level_node_has_no_parent(self):
        """Test that a single segment hierarchy has no parent."""
        node = classify_hierarchy("collection")

        assert node.parent_segment is None
        assert node.parent_role is None

    def test_empty_segments_are_dropped(self):
        """Test that doubled and trailing slashes do not create empty segments."""
        node = classify_hierarchy("root//manifest1/")

        assert node.segments == ("root", "manifest1")
        assert node.role is NodeRole.MANIFEST

    def test_custom_marker(self):
        """Test that a configured marker is used for canvases."""
        node = classify_hierarchy("m/manifest/canvas3", marker="+")

        assert node.name == "+canvas3"
        assert parse_canvas_index(node.name, marker="+") == 3

    @pytest.mark.parametrize("hierarchy", ["", "/", "//"])
    def test_empty_hierarchy_raises(self, hierarchy):
        """Test that a hierarchy without segments is rejected."""
        with pytest.raises(HierarchyError):
            classify_hierarchy(hierarchy)

    @pytest.mark.parametrize("hierarchy", ["../escape", "c/../../x", "c/./manifest1", ".."])
    def test_relative_segments_raise(self, hierarchy):
        """Test that '.' and '..' segments are rejected."""
        with pytest.raises(HierarchyError):
            classify_hierarchy(hierarchy)

    def test_dots_inside_a_segment_are_allowed(self):
        """Test that only whole '.' and '..' segments are rejected."""
        node = classify_hierarchy("c/v1..2_manifest")

        assert node.segments == ("c", "v1..2_manifest")

    def test_path_under_root(self, tmp_path):
        """Test that the node path is built under the output root."""
        node = classify_hierarchy("root/manifest1/canvas2")

        assert node.path_under(tmp_path) == tmp_path / "root" / "manifest1" / "_canvas2"
        assert node.relative_path == "root/manifest1/_canvas2"


class TestParseCanvasIndex:
    """Tests for reading the canvas number."""

    @pytest.mark.parametrize(
        "segment, expected",
        [
            ("_canvas1", 1),
            ("_canvas01", 1),
            ("_canvas10", 10),
            ("_canvas9a", 9),
            ("canvas3", 3),
            ("_canvas_12", 12),
        ],
    )
    def test_index(self, segment, expected):
        """Test that the leading digits after the canvas prefix are read."""
        assert parse_canvas_index(segment) == expected

    @pytest.mark.parametrize("segment", ["_canvas", "_canvas_front", "_canvas-1"])
    def test_no_index(self, segment):
        """Test that segments without a number have no index."""
        assert parse_canvas_index(segment) is None


class TestNesting:
    """Tests for nesting rule warnings."""

    def test_canvas_in_manifest_is_valid(self):
        """Test that a correctly nested canvas raises no warning."""
        report = validate_nesting(classify_hierarchy("root/photos/manifest1/canvas1"))

        assert report.warnings == []

    def test_canvas_outside_manifest_warns(self):
        """Test that a canvas directly in a collection raises a warning."""
        report = validate_nesting(classify_hierarchy("root/canvas1"))

        assert len(report.warnings) == 1
        warning = report.warnings[0]
        assert warning.subject == "root/canvas1"
        assert "must be inside a manifest" in warning.message
        assert warning.source_value == "root"

    def test_manifest_in_manifest_warns(self):
        """Test that a manifest nested in a manifest raises a warning."""
        report = validate_nesting(classify_hierarchy("root/manifest1/manifest2"))

        assert len(report.warnings) == 1
        assert "cannot be inside another manifest" in report.warnings[0].message

    def test_manifest_in_collection_is_valid(self):
        """Test that a manifest inside a collection is fine."""
        report = validate_nesting(classify_hierarchy("root/photos/manifest1"))

        assert report.warnings == []

    def test_root_level_canvas_is_not_checked(self):
        """Test that a canvas without a parent raises no warning."""
        report = validate_nesting(classify_hierarchy("canvas1"))

        assert report.warnings == []

    def test_warnings_accumulate_on_shared_report(self):
        """Test that warnings are added to a report passed in."""
        report = validate_nesting(classify_hierarchy("a/canvas1"))
        validate_nesting(classify_hierarchy("b/canvas2"), report)

        assert [w.subject for w in report.warnings] == ["a/canvas1", "b/canvas2"]
