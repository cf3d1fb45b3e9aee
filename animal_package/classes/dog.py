from .animal import Animal


class Dog(Animal):
    def speak(self):
        super().speak()
        line = f"{self.name} speaking bhow bhow...!"
        print(line)
        return line
