# Add imports
from svclocator import initialize, inject

# Initialize a service locator
locator = initialize()


# Create classes with their dependencies declared through inject.params.
# Names starting with "$" are resolved from the locator by type name.
@inject.params("message_start", "message_end")
class DependencyOne:
    def __init__(self, message_start: str, message_end: str):
        self.message_start = message_start
        self.message_end = message_end


# Without declarations the locator reads the parameters of __init__,
# all of which are looked up in the literal parameters of the registration.
class DependencyTwo:
    def __init__(self, greeting: str):
        self.greeting = greeting


# A textual declaration works too.
@inject.source("function MessageBuilder($one, $two) {}")
class MessageBuilder:
    def __init__(self, dep1: DependencyOne, dep2: DependencyTwo):
        self.dep1 = dep1
        self.dep2 = dep2

    def get_message(self):
        return f"{self.dep2.greeting}! {self.dep1.message_start} {self.dep1.message_end}."


locator.register(
    "one",
    DependencyOne,
    parameters={"message_start": "I was initialized", "message_end": "with a service locator"},
)
locator.register("two", DependencyTwo, parameters={"greeting": "Bonjour"}, is_singleton=True)
locator.register("builder", MessageBuilder)

# Resolve an instance through the locator
message_builder = locator.resolve("builder")

# Use the class
message = message_builder.get_message()
print(message)

assert message == "Bonjour! I was initialized with a service locator."
assert message_builder.dep2 is locator.resolve("two")
