from .animal import Animal


class Cat(Animal):
    def speak(self):
        line = f"{self.name} speaking meow meow...!"
        print(line)
        return line
