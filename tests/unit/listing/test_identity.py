"""Tests for owner/group lookups and their numeric fallback."""

from __future__ import annotations

import os
import unittest
from types import SimpleNamespace
from unittest import mock

from lr.listing import identity


class IdentityLookupTests(unittest.TestCase):
    def setUp(self) -> None:
        identity.clear_identity_cache()

    def tearDown(self) -> None:
        identity.clear_identity_cache()

    def test_known_ids_resolve_to_names(self) -> None:
        with mock.patch("lr.listing.identity.pwd.getpwuid", return_value=SimpleNamespace(pw_name="renato")), \
                mock.patch("lr.listing.identity.grp.getgrgid", return_value=SimpleNamespace(gr_name="staff")):
            self.assertEqual(identity.user_display_name(1000), "renato")
            self.assertEqual(identity.group_display_name(50), "staff")

    def test_unmapped_ids_fall_back_to_numbers(self) -> None:
        with mock.patch("lr.listing.identity.pwd.getpwuid", side_effect=KeyError(4242)), \
                mock.patch("lr.listing.identity.grp.getgrgid", side_effect=KeyError(4343)):
            self.assertIsNone(identity.lookup_user_name(4242))
            self.assertIsNone(identity.lookup_group_name(4343))
            self.assertEqual(identity.user_display_name(4242), "4242")
            self.assertEqual(identity.group_display_name(4343), "4343")

    def test_out_of_range_ids_fall_back_to_numbers(self) -> None:
        with mock.patch("lr.listing.identity.pwd.getpwuid", side_effect=OverflowError("uid too large")):
            self.assertEqual(identity.user_display_name(2**40), str(2**40))

    def test_lookups_are_memoized(self) -> None:
        with mock.patch(
            "lr.listing.identity.pwd.getpwuid",
            return_value=SimpleNamespace(pw_name="renato"),
        ) as getpwuid:
            identity.user_display_name(1000)
            identity.user_display_name(1000)
        getpwuid.assert_called_once_with(1000)

    def test_current_user_resolves_without_error(self) -> None:
        name = identity.user_display_name(os.getuid())
        self.assertTrue(name)


if __name__ == "__main__":
    unittest.main()
