"""
Example classes built with define_class.

Math shows a static method; Cake shows a private method reached through
the definition surface by a public sibling.
"""
from classbuilder.builder import ClassRecord, define_class
from classbuilder.method import describe_method
from classbuilder.modifiers import get_modifiers


static, private = get_modifiers()


def build_math_class() -> ClassRecord:
    def Math(cls):
        cls.add = describe_method(static, lambda a, b: a + b)

    return define_class(Math)


def build_cake_class(temp: int = 250) -> ClassRecord:
    def Cake(cls):
        cls.temp = temp

        cls.getTemperature = describe_method(private, lambda self: self.temp)

        def is_cooked(self):
            # Private sibling is reached through the surface, not self
            if cls.getTemperature(self) >= 250:
                print("Cooked!")
                return True
            return False

        cls.isCooked = describe_method(is_cooked)

        def bake(self, temperature):
            self.temp = temperature

        cls.bake = describe_method(bake)

    return define_class(Cake)
