from .animal import Animal


class Cat(Animal):
    def say(self):
        line = f"{self.name} says meoooow.."
        print(line)
        return line
