from .animal import Animal


class Dog(Animal):
    def say(self):
        line = f"{self.name} barks."
        print(line)
        return line
