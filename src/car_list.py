'''
Singly linked list of cars kept in category order.

Cars of the same category stay in the order they were added.
'''

from config import CATEGORIES, category_rank
from errors import ValidationError


class ListNode:
    """One link of the list, holding a car"""

    def __init__(self, car):
        self.car = car
        self.next = None


class CarList:
    """Category ordered linked list that owns the cataloged cars"""

    def __init__(self):
        self.head = None
        self._size = 0

    def insert_by_category(self, car):
        """Insert after every car whose category sorts at or before this one"""
        node = ListNode(car)
        rank = category_rank(car.category)

        # Empty list or the new car sorts before the head
        if self.head is None or rank < category_rank(self.head.car.category):
            node.next = self.head
            self.head = node
            self._size += 1
            return

        current = self.head
        while current.next is not None and category_rank(current.next.car.category) <= rank:
            current = current.next

        node.next = current.next
        current.next = node
        self._size += 1

    def find_by_make_model(self, make, model):
        """Return the first car with this exact make and model, or None"""
        for car in self:
            if car.make == make and car.model == model:
                return car
        return None

    def remove(self, car):
        """Unlink the node holding this very car object"""
        previous = None
        current = self.head
        while current is not None:
            if current.car is car:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                self._size -= 1
                return True
            previous = current
            current = current.next
        return False

    def clear(self):
        self.head = None
        self._size = 0

    def __iter__(self):
        current = self.head
        while current is not None:
            yield current.car
            current = current.next

    def in_category(self, category):
        """Iterate over the cars of one category in list order"""
        if category not in CATEGORIES:
            raise ValidationError(f"Unknown category {category!r}, expected one of {', '.join(CATEGORIES)}")
        return (car for car in self if car.category == category)

    def for_each(self, visitor):
        for car in self:
            visitor(car)

    def for_each_in_category(self, category, visitor):
        for car in self.in_category(category):
            visitor(car)

    def __contains__(self, car):
        return any(item is car for item in self)

    def __len__(self):
        return self._size
