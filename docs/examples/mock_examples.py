from svclocator import inject


@inject.params("name")
class Adult:
    def __init__(self, name):
        self.name = name

    def print_name(self):
        print(self.name)


@inject.params("$adult")
class Child:
    def __init__(self, parent):
        self.parent = parent

    def print_parent(self):
        self.parent.print_name()

    def get_free_car(self):
        self.parent.buy_car_for_child()


from svclocator.mock import mock

mocked = mock(Child)
mocked.parent.print_name.assert_not_called()
mocked.print_parent()
mocked.parent.print_name.assert_called_once()

from unittest.mock import MagicMock, Mock

mocked_1 = mock(Child)

assert isinstance(mocked_1.parent, MagicMock)

# the mocking function receives the type name of each dependency
mocking_function = lambda type_name: Mock(spec=Adult, name=type_name)
mocked_2 = mock(Child, mocking_function=mocking_function)

assert isinstance(mocked_2.parent, Mock)

spoiled = True
try:
    mocked_2.get_free_car()
except AttributeError:
    spoiled = False
assert not spoiled


print("Mocking Tests Passed!")
