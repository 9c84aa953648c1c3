'''
Binary search tree of cars keyed by price.

The tree is not balanced. Equal prices go to the right, so cars with the
same price come out in the order they were inserted. Traversals use an
explicit stack so a degenerate tree (sorted input) cannot exhaust the
recursion limit.
'''


class TreeNode:
    """Tree node pointing at a car owned by the catalog"""

    def __init__(self, car):
        self.car = car
        self.left = None
        self.right = None


class PriceTree:
    def __init__(self):
        self.root = None
        self._size = 0

    def insert(self, car):
        """Use the price to place the car in the tree"""
        node = TreeNode(car)
        if self.root is None:
            self.root = node
            self._size += 1
            return

        current = self.root
        while True:
            if car.price < current.car.price:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        self._size += 1

    def rebuild(self, cars):
        """Throw the nodes away and insert the given cars in order"""
        self.clear()
        for car in cars:
            self.insert(car)

    def clear(self):
        self.root = None
        self._size = 0

    def ascending(self):
        """Cars from lowest to highest price"""
        return self._walk("left", "right")

    def descending(self):
        """Cars from highest to lowest price"""
        return self._walk("right", "left")

    def _walk(self, first, second):
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = getattr(node, first)
            node = stack.pop()
            yield node.car
            node = getattr(node, second)

    def traverse_ascending(self, visitor):
        for car in self.ascending():
            visitor(car)

    def traverse_descending(self, visitor):
        for car in self.descending():
            visitor(car)

    def height(self):
        """Number of levels on the longest root-to-leaf path"""
        if self.root is None:
            return 0
        tallest = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return tallest

    def __iter__(self):
        return self.ascending()

    def __len__(self):
        return self._size
