"""Shared fixtures: JavaDoc pages in both dialects, Java sources and loaders."""

import os
import sys
import threading
import time

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from javadoc_provider.loaders import ResourceLoader  # noqa: E402
from javadoc_provider.utils import Logger  # noqa: E402


# Page layout written by the Java 7 javadoc tool
MODERN_BOOKSTORE_PAGE = """<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN">
<html lang="en">
<head><title>BookStore</title></head>
<body>
<!-- ======== START OF CLASS DATA ======== -->
<div class="header">
<div class="subTitle">org.acme</div>
<h2 title="Interface BookStore" class="title">Interface BookStore</h2>
</div>
<div class="contentContainer">
<div class="description">
<ul class="blockList">
<li class="blockList">
<hr>
<br>
<pre>@Path(value="/bookstore")
public interface <span class="strong">BookStore</span></pre>
<div class="block">Book store resource.</div>
</li>
</ul>
</div>
<div class="summary">
<a name="method_summary">
<!--   -->
</a>
<h3>Method Summary</h3>
<table class="overviewSummary" border="0" cellpadding="3" cellspacing="0" summary="Method Summary table">
<tr class="altColor">
<td class="colFirst"><code>Book</code></td>
<td class="colLast"><code><strong><a href="../../org/acme/BookStore.html#getBook(java.lang.String)">getBook</a></strong>(java.lang.String&nbsp;id)</code>
<div class="block">Returns the book with the given id.</div>
</td>
</tr>
</table>
</div>
<div class="details">
<a name="method_detail">
<!--   -->
</a>
<h3>Method Detail</h3>
<a name="getBook(java.lang.String)">
<!--   -->
</a>
<ul class="blockList">
<li class="blockList">
<h4>getBook</h4>
<pre>@GET
@Path(value="/books/{id}")
<a href="../../org/acme/Book.html" title="class in org.acme">Book</a>&nbsp;getBook(@PathParam(value="id")
           java.lang.String&nbsp;id)</pre>
<div class="block">Returns the book with the given id.</div>
<dl><dt><span class="strong">Parameters:</span></dt><dd><code>id</code> - the book identifier</dd>
<dt><span class="strong">Returns:</span></dt><dd>the matching book</dd></dl>
</li>
</ul>
<a name="deleteBook(java.lang.String)">
<!--   -->
</a>
<ul class="blockList">
<li class="blockList">
<h4>deleteBook</h4>
<pre>@DELETE
void&nbsp;deleteBook(java.lang.String&nbsp;id)</pre>
</li>
</ul>
<a name="getBooks()">
<!--   -->
</a>
<ul class="blockList">
<li class="blockList">
<h4>getBooks</h4>
<pre>@GET
java.util.List&lt;Book&gt;&nbsp;getBooks()</pre>
<div class="block">Lists every book.</div>
<dl><dt><span class="strong">Returns:</span></dt><dd>all books</dd></dl>
</li>
</ul>
<a name="getBooks(int, int)">
<!--   -->
</a>
<ul class="blockList">
<li class="blockList">
<h4>getBooks</h4>
<pre>@GET
java.util.List&lt;Book&gt;&nbsp;getBooks(int&nbsp;start,
                         int&nbsp;size)</pre>
<div class="block">Lists one page of books.</div>
<dl><dt><span class="strong">Parameters:</span></dt><dd><code>start</code> - index of the first book</dd>
<dd><code>size</code> - page size</dd>
</dl>
</li>
</ul>
</div>
</div>
</body>
</html>
"""

# Page layout written by the Java 6 javadoc tool
LEGACY_ITEMSTORE_PAGE = """<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN">
<HTML>
<BODY BGCOLOR="white">
<!-- ======== START OF CLASS DATA ======== -->
<H2>
<FONT SIZE="-1">
org.acme</FONT>
<BR>
Class ItemStore</H2>
<PRE>
java.lang.Object
  <IMG SRC="../../resources/inherit.gif" ALT="extended by "><B>org.acme.ItemStore</B>
</PRE>
<HR>
<DL>
<DT><PRE>@Path(value="/items")
public class <B>ItemStore</B><DT>extends java.lang.Object</DL>
</PRE>

<P>
Item store resource.
<P>

<HR>

<!-- ========== METHOD SUMMARY =========== -->
<A NAME="method_summary"><!-- --></A>
<TABLE BORDER="1" WIDTH="100%" CELLPADDING="3" CELLSPACING="0" SUMMARY="">
<TR BGCOLOR="#CCCCFF" CLASS="TableHeadingColor">
<TH ALIGN="left" COLSPAN="2"><FONT SIZE="+2">
<B>Method Summary</B></FONT></TH>
</TR>
</TABLE>

<!-- ============ METHOD DETAIL ========== -->
<A NAME="getItem(long)"><!-- --></A><H3>
getItem</H3>
<PRE>
public java.lang.String <B>getItem</B>(long&nbsp;id)</PRE>
<DL>
<DD>Fetches one item.
<P>
<DD><DL>
<DT><B>Parameters:</B><DD><CODE>id</CODE> - the item id<DT><B>Returns:</B><DD>the item name</DL>
</DD>
</DL>
<HR>
</BODY>
</HTML>
"""

BOOKSTORE_SOURCE = """package org.acme;

import javax.ws.rs.DELETE;
import javax.ws.rs.GET;
import javax.ws.rs.Path;
import javax.ws.rs.PathParam;
import java.util.List;

/**
 * Book store resource.
 */
@Path("/bookstore")
public interface BookStore {

    @GET
    @Path("/books/{id}")
    Book getBook(@PathParam("id") String id);

    @DELETE
    void deleteBook(String id);

    @GET
    List<Book> getBooks();

    @GET
    List<Book> getBooks(int start, int size);
}
"""

BOOKSTORE_IMPL_SOURCE = """package org.acme;

import java.util.Collections;
import java.util.List;

public class BookStoreImpl extends AbstractStore implements BookStore {

    public Book getBook(String id) {
        return null;
    }

    public void deleteBook(String id) {
    }

    public List<Book> getBooks() {
        return Collections.emptyList();
    }

    public List<Book> getBooks(int start, int size) {
        return Collections.emptyList();
    }

    void reindex() {
    }
}
"""

ABSTRACT_STORE_SOURCE = """package org.acme;

public abstract class AbstractStore {

    public String describe(String[] tags, Object... extras) {
        return "";
    }
}
"""


class MemoryLoader(ResourceLoader):
    """Serves pages from a dict and counts load calls."""

    def __init__(self, pages, delay: float = 0.0):
        super().__init__("memory")
        self.pages = dict(pages)
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def load(self, resource_path):
        with self._lock:
            self.calls.append(resource_path)
        if self.delay:
            time.sleep(self.delay)
        return self.pages.get(resource_path)


class FailingLoader(ResourceLoader):
    """Raises on every load."""

    def __init__(self):
        super().__init__("failing")

    def load(self, resource_path):
        raise RuntimeError(f"storage offline while loading {resource_path}")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    Logger.reset()


@pytest.fixture
def modern_page():
    return MODERN_BOOKSTORE_PAGE


@pytest.fixture
def legacy_page():
    return LEGACY_ITEMSTORE_PAGE


@pytest.fixture
def memory_loader():
    return MemoryLoader({
        "org/acme/BookStore.html": MODERN_BOOKSTORE_PAGE,
        "org/acme/ItemStore.html": LEGACY_ITEMSTORE_PAGE,
    })


@pytest.fixture
def javadoc_dir(tmp_path):
    """A javadoc tree on disk holding the BookStore page."""
    docs = tmp_path / "apidocs"
    page = docs / "org" / "acme" / "BookStore.html"
    page.parent.mkdir(parents=True)
    page.write_text(MODERN_BOOKSTORE_PAGE, encoding="utf-8")
    return docs


@pytest.fixture
def java_sources(tmp_path):
    """BookStore interface, implementation and abstract base on disk."""
    src = tmp_path / "java" / "org" / "acme"
    src.mkdir(parents=True)
    files = {}
    for name, content in (
        ("BookStore.java", BOOKSTORE_SOURCE),
        ("BookStoreImpl.java", BOOKSTORE_IMPL_SOURCE),
        ("AbstractStore.java", ABSTRACT_STORE_SOURCE),
    ):
        path = src / name
        path.write_text(content, encoding="utf-8")
        files[name] = str(path)
    return files
