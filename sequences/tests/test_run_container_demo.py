"""
Tests for the run_container_demo management command.
"""
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings


class RunContainerDemoTestCase(SimpleTestCase):

    def run_demo(self, *args, **options):
        out = StringIO()
        call_command("run_container_demo", *args, stdout=out, **options)
        return out.getvalue()

    def test_full_demo_output(self):
        output = self.run_demo()

        self.assertIn("=== ArrayList demo ===", output)
        self.assertIn("=== LinkedList demo ===", output)
        self.assertIn("Element at index 1: 4", output)
        self.assertIn("Element at index 2 after removal: 3", output)
        self.assertIn("Sub-list size: 2", output)
        self.assertIn("Element at index 1: d", output)
        self.assertIn("Element at index 2 after removal: c", output)
        self.assertIn("Size after removal by index: 2", output)
        self.assertIn("Sub-list size: 1", output)
        self.assertEqual(output.count("Size of list built from collection: 3"), 2)

    def test_only_linked(self):
        output = self.run_demo(only="linked")

        self.assertNotIn("ArrayList demo", output)
        self.assertIn("LinkedList demo", output)

    def test_only_array(self):
        output = self.run_demo(only="array")

        self.assertIn("ArrayList demo", output)
        self.assertNotIn("LinkedList demo", output)

    def test_verbose_prints_contents(self):
        output = self.run_demo(only="array", verbose=True)

        self.assertIn("ArrayList([1, 4, 3])", output)

    @override_settings(SEQUENCES_DEMO_VERBOSE=True)
    def test_verbose_from_settings(self):
        output = self.run_demo(only="linked")

        self.assertIn("LinkedList(['a', 'c'])", output)

    def test_contents_hidden_by_default(self):
        output = self.run_demo(only="array")

        self.assertNotIn("ArrayList([", output)

    def test_invalid_only_choice(self):
        with self.assertRaises(CommandError):
            self.run_demo("--only", "tree")

    def test_demo_logs_start_and_finish(self):
        with self.assertLogs("sequences.management.commands.run_container_demo", level="INFO") as logs:
            self.run_demo(only="array")

        self.assertIn("Starting container demo (only=array)", logs.output[0])
        self.assertIn("Container demo finished", logs.output[-1])
