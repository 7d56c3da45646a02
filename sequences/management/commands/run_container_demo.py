"""
Management command to exercise both sequence containers and print the results.

Usage:
    python manage.py run_container_demo
    python manage.py run_container_demo --only linked
    python manage.py run_container_demo --verbose  # Also print contents after each step
"""
import logging

from django.conf import settings
from django.core.management.base import BaseCommand

from sequences.services import ArrayList, LinkedList

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Run the ArrayList and LinkedList demonstration and print each result."

    def add_arguments(self, parser):
        parser.add_argument(
            '--only',
            choices=['array', 'linked'],
            help='Run only one of the two demonstrations',
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Print the full container contents after each step',
        )

    def handle(self, *args, **options):
        only = options.get('only')
        self.verbose = options.get('verbose') or getattr(settings, "SEQUENCES_DEMO_VERBOSE", False)

        logger.info(f"Starting container demo (only={only or 'all'})")

        if only in (None, 'array'):
            self._array_demo()
        if only is None:
            self.stdout.write("")
        if only in (None, 'linked'):
            self._linked_demo()

        logger.info("Container demo finished")

    def _show(self, container):
        if self.verbose:
            self.stdout.write(f"    {container!r}")

    def _array_demo(self):
        self.stdout.write(self.style.SUCCESS("=== ArrayList demo ==="))

        numbers: ArrayList[int] = ArrayList()
        self.stdout.write(f"Initial size: {numbers.size()}")

        numbers.add(1)
        numbers.add(2)
        numbers.add(3)
        self.stdout.write(f"Size after adding elements: {numbers.size()}")
        self._show(numbers)

        numbers.insert(1, 4)
        self.stdout.write(f"Element at index 1: {numbers.get(1)}")
        self._show(numbers)

        numbers.remove_at(2)
        self.stdout.write(f"Element at index 2 after removal: {numbers.get(2)}")
        self._show(numbers)

        sub = numbers.sub_list(1, 3)
        self.stdout.write(f"Sub-list size: {sub.size()}")
        self._show(sub)

        copied = ArrayList.from_iterable([10, 20, 30])
        self.stdout.write(f"Size of list built from collection: {copied.size()}")
        self._show(copied)

    def _linked_demo(self):
        self.stdout.write(self.style.SUCCESS("=== LinkedList demo ==="))

        letters: LinkedList[str] = LinkedList()
        self.stdout.write(f"Initial size: {letters.size()}")

        letters.add("a")
        letters.add("b")
        letters.add("c")
        self.stdout.write(f"Size after adding elements: {letters.size()}")
        self._show(letters)

        letters.insert(1, "d")
        self.stdout.write(f"Element at index 1: {letters.get(1)}")
        self._show(letters)

        letters.remove("b")
        self.stdout.write(f"Element at index 2 after removal: {letters.get(2)}")
        self._show(letters)

        letters.remove_at(1)
        self.stdout.write(f"Size after removal by index: {letters.size()}")
        self._show(letters)

        sub = letters.sub_list(0, 1)
        self.stdout.write(f"Sub-list size: {sub.size()}")
        self._show(sub)

        copied = LinkedList.from_iterable(["x", "y", "z"])
        self.stdout.write(f"Size of list built from collection: {copied.size()}")
        self._show(copied)
