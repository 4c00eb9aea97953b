import slugline.elements as elements


# one classified line of a screenplay
class Element:
    def __init__(self, lt=elements.ACTION, text=""):

        # line type
        self.lt = lt

        # text, exactly as in the source buffer
        self.text = text

    def __str__(self):
        return "%s:%s" % (elements.lt2name(self.lt), self.text)

    def __repr__(self) -> str:
        return self.__str__()

    def __ne__(self, other):
        return (self.lt != other.lt) or (self.text != other.text)

    def __eq__(self, other):
        return not self.__ne__(other)

    def isEmpty(self):
        return self.lt == elements.EMPTY
