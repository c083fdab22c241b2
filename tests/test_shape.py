import unittest

from shape import Shape, ShapeError


def grid(*rows: str) -> Shape:
    return Shape.from_rows(rows)


class ShapeConstructionTests(unittest.TestCase):
    def test_id_defaults_to_first_filled_symbol(self) -> None:
        self.assertEqual("T", grid(".T.", "TTT").id)

    def test_dimensions(self) -> None:
        shape = grid("TTTT", ".T..")
        self.assertEqual(4, shape.width)
        self.assertEqual(2, shape.height)
        self.assertEqual(5, shape.filled_count)

    def test_ragged_rows_are_rejected(self) -> None:
        with self.assertRaises(ShapeError):
            grid("AA", "A")

    def test_empty_grid_is_rejected(self) -> None:
        with self.assertRaises(ShapeError):
            Shape.from_rows([], id="X")
        with self.assertRaises(ShapeError):
            Shape.from_rows([""], id="X")

    def test_all_empty_shape_needs_explicit_id(self) -> None:
        with self.assertRaises(ShapeError):
            grid("..", "..")
        self.assertEqual("#", Shape.from_rows(["..", ".."], id="#").id)

    def test_equality_ignores_id(self) -> None:
        self.assertEqual(Shape.from_rows(["AB"], id="A"), Shape.from_rows(["AB"], id="B"))
        self.assertNotEqual(grid("AA"), grid("A", "A"))


class ShapeTransformTests(unittest.TestCase):
    def test_coords_are_row_major_and_restartable(self) -> None:
        shape = grid("AB", "CD", "EF")
        expected = [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
        self.assertEqual(expected, list(shape.coords()))
        self.assertEqual(expected, list(shape.coords()))

    def test_reflect_reverses_rows(self) -> None:
        self.assertEqual(["..F", "..F", "FFF"], grid("F..", "F..", "FFF").reflect().rows())

    def test_transpose_swaps_dimensions(self) -> None:
        result = grid("TTTT", ".T..").transpose()
        self.assertEqual(["T.", "TT", "T.", "T."], result.rows())
        self.assertEqual((4, 2), (result.height, result.width))

    def test_rotate_is_reflect_then_transpose(self) -> None:
        shape = grid("L...", "LLLL")
        self.assertEqual(shape.reflect().transpose(), shape.rotate())
        self.assertEqual([".L", ".L", ".L", "LL"], shape.rotate().rows())

    def test_four_rotations_are_identity(self) -> None:
        for rows in (("F..", "F..", "FFF"), ("SS..", ".SSS"), ("AB", "CD", "EF")):
            shape = grid(*rows)
            rotated = shape
            for _ in range(4):
                rotated = rotated.rotate()
            self.assertEqual(shape, rotated)

    def test_double_reflect_is_identity(self) -> None:
        shape = grid("Z..", "ZZZ", "..Z")
        self.assertEqual(shape, shape.reflect().reflect())

    def test_transforms_do_not_mutate(self) -> None:
        shape = grid("BB.", "BBB")
        shape.rotate()
        shape.reflect()
        shape.transpose()
        self.assertEqual(["BB.", "BBB"], shape.rows())


if __name__ == "__main__":
    unittest.main()
