import doctest
import htmlworddiff
from htmlworddiff import HtmlDiff, DiffStateError

doctest.testmod(htmlworddiff, verbose=True)

# Additional regression checks (basic asserts)
def _assert_contains(haystack, needle):
    assert needle in haystack, "Expected %r to contain %r" % (haystack, needle)


def _page(old, new):
    d = HtmlDiff(old, new)
    d.compute_diff()
    return d.build_diff_page()


def run_regressions():
    # Delete before insert ordering in a replace
    out = _page('Foo bar', 'Foo baz')
    assert out.index('<del') < out.index('<ins'), out

    # Inline formatting tags are kept outside the insertion
    out = _page('<b>hello</b>', '<b>hello world</b>')
    assert out == '<b>hello<ins class="diffins"> world</ins></b>', out

    # New bold word gets the mod shell right after <b>
    out = _page('Foo bar', 'Foo <b>new</b> bar')
    _assert_contains(out, "<b><ins class='mod'>")

    # Identical input is returned unchanged
    d = HtmlDiff('<p>a b c</p>', '<p>a b c</p>')
    assert d.compute_diff() is False
    assert d.build_diff_page() == '<p>a b c</p>'

    # Rendering requires compute_diff() first
    try:
        HtmlDiff('a', 'b').build_diff_page()
    except DiffStateError:
        pass
    else:
        raise AssertionError('expected DiffStateError')


if __name__ == '__main__':
    run_regressions()
