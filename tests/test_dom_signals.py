from dom_signals import count_elements


def test_counts_elements() -> None:
    html = """
    <html><head><title> Home </title></head><body>
      <a href="/">x</a><a href="/y">y</a><a>z</a>
      <form></form><form><button type="submit">Send</button></form>
      <img src="a.png"><img src="b.png">
    </body></html>
    """
    assert count_elements(html) == {
        "links": 3,
        "forms": 2,
        "buttons": 1,
        "images": 2,
        "has_title": True,
    }


def test_blank_title_is_missing() -> None:
    assert count_elements("<html><head><title>   </title></head></html>")["has_title"] is False
    assert count_elements("")["has_title"] is False
